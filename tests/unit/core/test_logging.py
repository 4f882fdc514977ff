from structlog.testing import capture_logs

from stationops.core.logging import add_logger_name, get_logger


def test_module_name_is_bound():
    logger = get_logger("stationops.domain.services.leave_service")

    with capture_logs() as logs:
        logger.info("Leave requested", days=5)

    assert logs[0]["logger"] == "stationops.domain.services.leave_service"
    assert logs[0]["days"] == 5


def test_unnamed_logger_uses_package_name():
    with capture_logs() as logs:
        get_logger().info("hello")

    assert logs[0]["logger"] == "stationops"


def test_add_logger_name_keeps_bound_name():
    assert add_logger_name(None, "info", {})["logger"] == "stationops"
    assert add_logger_name(None, "info", {"logger": "stationops.cli"})["logger"] == "stationops.cli"
