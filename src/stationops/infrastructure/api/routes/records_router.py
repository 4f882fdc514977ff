"""Client, employee and human-readable ID routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from stationops.domain.services.access_policy import Capability
from stationops.domain.services.client_service import ClientService
from stationops.domain.services.employee_service import EmployeeService
from stationops.domain.services.human_id_generator import HumanIdGenerator
from stationops.infrastructure.api.dependencies import (
    AuthenticatedUser,
    CurrentUser,
    DbSession,
    require_capability,
)
from stationops.infrastructure.api.schemas import (
    ClientCreateRequest,
    ClientResponse,
    ClientUpdateRequest,
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeUpdateRequest,
    HumanIdParseResponse,
)

clients_router = APIRouter()
employees_router = APIRouter()
ids_router = APIRouter()


@clients_router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponse)
async def create_client(
    request: ClientCreateRequest,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_CLIENTS))],
    session: DbSession,
) -> ClientResponse:
    client = await ClientService(session).create_client(**request.model_dump())
    return ClientResponse.model_validate(client)


@clients_router.get("", response_model=list[ClientResponse])
async def list_clients(
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_CLIENTS))],
    session: DbSession,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> list[ClientResponse]:
    clients = await ClientService(session).list_clients(status=status_filter)
    return [ClientResponse.model_validate(c) for c in clients]


@clients_router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_CLIENTS))],
    session: DbSession,
) -> ClientResponse:
    return ClientResponse.model_validate(await ClientService(session).get_client(client_id))


@clients_router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    request: ClientUpdateRequest,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_CLIENTS))],
    session: DbSession,
) -> ClientResponse:
    """Edit a client. The client code is fixed and cannot be sent."""
    client = await ClientService(session).update_client(client_id, **request.changes())
    return ClientResponse.model_validate(client)


@employees_router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeResponse)
async def create_employee(
    request: EmployeeCreateRequest,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_EMPLOYEES))],
    session: DbSession,
) -> EmployeeResponse:
    employee = await EmployeeService(session).create_employee(**request.model_dump())
    return EmployeeResponse.model_validate(employee)


@employees_router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_EMPLOYEES))],
    session: DbSession,
    department: str | None = None,
) -> list[EmployeeResponse]:
    employees = await EmployeeService(session).list_employees(department=department)
    return [EmployeeResponse.model_validate(e) for e in employees]


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.VIEW_EMPLOYEES))],
    session: DbSession,
) -> EmployeeResponse:
    return EmployeeResponse.model_validate(await EmployeeService(session).get_employee(employee_id))


@employees_router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    request: EmployeeUpdateRequest,
    _: Annotated[CurrentUser, Depends(require_capability(Capability.MANAGE_EMPLOYEES))],
    session: DbSession,
) -> EmployeeResponse:
    employee = await EmployeeService(session).update_employee(employee_id, **request.changes())
    return EmployeeResponse.model_validate(employee)


@ids_router.get("/parse", response_model=HumanIdParseResponse)
async def parse_human_id(
    _: AuthenticatedUser,
    value: Annotated[str, Query(max_length=32)],
) -> HumanIdParseResponse:
    """Split a client or staff ID into kind, year and sequence."""
    kind = HumanIdGenerator.kind_of(value)
    return HumanIdParseResponse(
        value=value,
        valid=kind is not None,
        kind=kind,
        year=HumanIdGenerator.year_of(value),
        sequence=HumanIdGenerator.sequence_of(value),
    )
