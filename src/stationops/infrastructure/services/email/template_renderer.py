"""Jinja2 renderer for email templates.

Templates render in a sandbox with HTML autoescaping and fail loudly on
undefined variables.
"""

from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from stationops.core.logging import get_logger

logger = get_logger(__name__)


class TemplateRenderer:
    """Renders template strings against a variable mapping."""

    def __init__(self) -> None:
        self.env = SandboxedEnvironment(
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_string: str, variables: dict[str, object]) -> str:
        """Render a template string.

        Raises:
            jinja2.TemplateError: On syntax errors or missing variables.
        """
        try:
            return self.env.from_string(template_string).render(**variables)
        except TemplateError as e:
            logger.error("Template rendering failed", error=str(e))
            raise


_template_renderer: TemplateRenderer | None = None


def get_template_renderer() -> TemplateRenderer:
    global _template_renderer
    if _template_renderer is None:
        _template_renderer = TemplateRenderer()
    return _template_renderer
