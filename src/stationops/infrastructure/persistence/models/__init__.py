"""SQLAlchemy ORM models.

Importing this package registers every table with ``Base.metadata``.
"""

from stationops.infrastructure.persistence.models.client import ClientModel
from stationops.infrastructure.persistence.models.employee import EmployeeModel
from stationops.infrastructure.persistence.models.id_sequence import IdSequenceModel
from stationops.infrastructure.persistence.models.invitation import InvitationModel
from stationops.infrastructure.persistence.models.leave_request import LeaveRequestModel
from stationops.infrastructure.persistence.models.profile import ProfileModel
from stationops.infrastructure.persistence.models.schedule import AdSlotModel, ShowModel
from stationops.infrastructure.persistence.models.user import UserModel

__all__ = [
    "AdSlotModel",
    "ClientModel",
    "EmployeeModel",
    "IdSequenceModel",
    "InvitationModel",
    "LeaveRequestModel",
    "ProfileModel",
    "ShowModel",
    "UserModel",
]
