"""Pydantic schemas for clients, employees and ID parsing."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from stationops.domain.entities.record_kind import RecordKind

ClientStatus = Literal["active", "overdue", "inactive"]
EmployeeStatus = Literal["active", "on_leave", "terminated"]


class PartialUpdate(BaseModel):
    """Base for PATCH bodies. Only fields the caller sent are applied.

    Unknown fields, including the human-readable codes, are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self) -> "PartialUpdate":
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ClientCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    company: str | None = Field(None, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    status: ClientStatus = "active"
    payment_terms: str | None = Field(None, max_length=50)
    contract_amount: Decimal | None = Field(None, ge=0)


class ClientUpdateRequest(PartialUpdate):
    required_fields = ("name", "status")

    name: str | None = Field(None, min_length=1, max_length=255)
    company: str | None = Field(None, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    status: ClientStatus | None = None
    payment_terms: str | None = Field(None, max_length=50)
    contract_amount: Decimal | None = Field(None, ge=0)


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_code: str = Field(..., description="Human-readable ID, e.g. C24001")
    name: str
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    status: str
    payment_terms: str | None = None
    contract_amount: Decimal | None = None
    created_at: datetime


class EmployeeCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    hire_date: date
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=100)
    department: str | None = Field(None, max_length=100)
    salary: Decimal | None = Field(None, ge=0)
    status: EmployeeStatus = "active"


class EmployeeUpdateRequest(PartialUpdate):
    required_fields = ("name", "hire_date", "status")

    name: str | None = Field(None, min_length=1, max_length=255)
    hire_date: date | None = None
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    position: str | None = Field(None, max_length=100)
    department: str | None = Field(None, max_length=100)
    salary: Decimal | None = Field(None, ge=0)
    status: EmployeeStatus | None = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_code: str = Field(..., description="Human-readable ID, e.g. S23006")
    name: str
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    department: str | None = None
    hire_date: date
    salary: Decimal | None = None
    status: str
    created_at: datetime


class HumanIdParseResponse(BaseModel):
    """Parts of a human-readable ID. All parts are null when it is malformed."""

    value: str
    valid: bool
    kind: RecordKind | None = None
    year: int | None = None
    sequence: int | None = None
