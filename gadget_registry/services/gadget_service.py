"""
Gadget service - business logic for gadgets (SOLID: Single Responsibility).
Challenge: Rental state machine (Available <-> Rented), cache invalidation; keep controllers thin.
Design: Service depends on the repository; errors are domain exceptions, not HTTP ones.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import NoReturn

from gadget_registry.cache.redis_client import cache_get, cache_set, invalidate_on_commit
from gadget_registry.core import metrics
from gadget_registry.core.exceptions import (
    GadgetDeleteNotFoundError,
    GadgetError,
    GadgetNotAvailableError,
    GadgetNotFoundError,
    GadgetNotRentedError,
)
from gadget_registry.db.models.gadget import Gadget
from gadget_registry.db.repositories.gadget_repository import GadgetRepository
from gadget_registry.schemas.gadget import GadgetCreate, GadgetResponse

logger = logging.getLogger(__name__)

# Cache key prefix for gadget detail
CACHE_PREFIX = "gadget:"


def utcnow() -> datetime:
    """Current UTC time at millisecond resolution."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def new_gadget_id() -> str:
    return str(uuid.uuid4())


def _to_response(gadget: Gadget) -> GadgetResponse:
    return GadgetResponse.model_validate(gadget)


class GadgetService:
    """Handles all gadget use cases: create, list, get, rent, return, delete."""

    def __init__(self, gadget_repo: GadgetRepository):
        self.gadget_repo = gadget_repo

    async def create(self, data: GadgetCreate) -> GadgetResponse:
        """Store a new gadget: fresh id, created now, available, not rented."""
        gadget = Gadget(
            id=new_gadget_id(),
            name=data.name,
            type=data.type,
            description=data.description,
            price_per_day=data.price_per_day,
            owner=data.owner,
            availability=True,
            rented_by=None,
            created_at=utcnow(),
            updated_at=None,
        )
        gadget = await self.gadget_repo.add(gadget)
        logger.info("Created gadget id=%s owner=%s", gadget.id, gadget.owner)
        metrics.record("create")
        return _to_response(gadget)

    async def list_gadgets(self) -> list[GadgetResponse]:
        gadgets = await self.gadget_repo.get_all()
        metrics.record("list")
        return [_to_response(g) for g in gadgets]

    async def get_by_id(self, id: str, use_cache: bool = True) -> GadgetResponse:
        """Get gadget by id. Uses Redis cache to reduce DB load."""
        if use_cache:
            cached = await cache_get(CACHE_PREFIX + id)
            if cached:
                metrics.record("get")
                return GadgetResponse.model_validate(cached)
        gadget = await self.gadget_repo.get_by_id(id)
        if gadget is None:
            metrics.record("get", "not_found")
            raise GadgetNotFoundError(id)
        resp = _to_response(gadget)
        if use_cache:
            await cache_set(CACHE_PREFIX + id, resp.model_dump(mode="json", by_alias=True))
        metrics.record("get")
        return resp

    async def rent(self, id: str, renter: str) -> GadgetResponse:
        """Available -> Rented. NotFound first, then NotAvailable."""
        gadget = await self.gadget_repo.swap_availability(
            id, expected=True, rented_by=renter, updated_at=utcnow()
        )
        if gadget is None:
            await self._raise_rejected("rent", id, GadgetNotAvailableError)
        invalidate_on_commit(self.gadget_repo.session, CACHE_PREFIX + id)
        logger.info("Gadget id=%s rented by %s", id, renter)
        metrics.record("rent")
        return _to_response(gadget)

    async def return_gadget(self, id: str) -> GadgetResponse:
        """Rented -> Available. NotFound first, then NotRented."""
        gadget = await self.gadget_repo.swap_availability(
            id, expected=False, rented_by=None, updated_at=utcnow()
        )
        if gadget is None:
            await self._raise_rejected("return", id, GadgetNotRentedError)
        invalidate_on_commit(self.gadget_repo.session, CACHE_PREFIX + id)
        logger.info("Gadget id=%s returned", id)
        metrics.record("return")
        return _to_response(gadget)

    async def delete(self, id: str) -> GadgetResponse:
        """Remove the gadget and return its last state."""
        gadget = await self.gadget_repo.delete_by_id(id)
        if gadget is None:
            logger.warning("Delete rejected: gadget id=%s not found", id)
            metrics.record("delete", "not_found")
            raise GadgetDeleteNotFoundError(id)
        invalidate_on_commit(self.gadget_repo.session, CACHE_PREFIX + id)
        logger.info("Deleted gadget id=%s", id)
        metrics.record("delete")
        return _to_response(gadget)

    async def _raise_rejected(self, operation: str, id: str, invalid_state_error: type[GadgetError]) -> NoReturn:
        """The conditional update matched nothing: tell a missing id from a wrong state."""
        if await self.gadget_repo.get_by_id(id) is None:
            logger.warning("%s rejected: gadget id=%s not found", operation.capitalize(), id)
            metrics.record(operation, "not_found")
            raise GadgetNotFoundError(id)
        logger.warning("%s rejected: gadget id=%s in wrong state", operation.capitalize(), id)
        metrics.record(operation, "invalid_state")
        raise invalid_state_error(id)
