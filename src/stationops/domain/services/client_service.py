"""Advertiser records."""

import uuid
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from stationops.core.exceptions import InvalidRecordError, RecordNotFoundError
from stationops.core.logging import get_logger
from stationops.domain.entities.record_kind import RecordKind
from stationops.domain.services.record_id_service import RecordIdService
from stationops.infrastructure.persistence.database import utcnow
from stationops.infrastructure.persistence.models import ClientModel
from stationops.infrastructure.persistence.repositories import (
    ClientRepository,
    ScheduleRepository,
)

logger = get_logger(__name__)

# client_code is assigned once, at creation.
UPDATABLE_FIELDS = frozenset(
    {"name", "company", "email", "phone", "address", "status", "payment_terms", "contract_amount"}
)


class ClientService:
    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.session = session
        self.clock = clock
        self.clients = ClientRepository(session)
        self.schedule = ScheduleRepository(session)
        self.record_ids = RecordIdService(session)

    async def create_client(
        self,
        name: str,
        company: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        status: str = "active",
        payment_terms: str | None = None,
        contract_amount: Decimal | None = None,
    ) -> ClientModel:
        """Create a client and label it with the next client code.

        The creation time is the reference date of the code.
        """
        now = self.clock()
        try:
            client_code = await self.record_ids.allocate(RecordKind.CLIENT, now)
            client = ClientModel(
                id=str(uuid.uuid4()),
                client_code=client_code,
                name=name,
                company=company,
                email=email,
                phone=phone,
                address=address,
                status=status,
                payment_terms=payment_terms,
                contract_amount=contract_amount,
                created_at=now,
            )
            await self.clients.create(client)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Client created", client_id=client.id, client_code=client_code)
        return client

    async def get_client(self, client_id: str) -> ClientModel:
        client = await self.clients.get_by_id(client_id)
        if client is None:
            raise RecordNotFoundError("Client not found")
        return client

    async def list_clients(self, status: str | None = None) -> list[ClientModel]:
        return await self.clients.list_clients(status=status)

    async def update_client(self, client_id: str, **changes) -> ClientModel:
        """Apply field changes to a client.

        Raises:
            RecordNotFoundError: If the client does not exist.
            InvalidRecordError: If a change targets a field that cannot be
                edited, such as ``client_code``.
        """
        locked = sorted(set(changes) - UPDATABLE_FIELDS)
        if locked:
            raise InvalidRecordError(
                f"Cannot change {', '.join(locked)}",
                details=[{"field": field} for field in locked],
            )

        client = await self.get_client(client_id)
        for field, value in changes.items():
            setattr(client, field, value)
        if "name" in changes:
            await self.schedule.rename_client(client.id, client.name)
        await self.session.commit()

        logger.info("Client updated", client_id=client.id, fields=sorted(changes))
        return client
