"""
Gadget repository - gadget data access.
Challenge: Keep the availability invariant under concurrent requests.
Design: Rent/return are one conditional UPDATE (compare-and-swap on availability),
so two racing requests cannot both flip the same gadget.
"""

from datetime import datetime

from sqlalchemy import update

from gadget_registry.db.models.gadget import Gadget
from gadget_registry.db.repositories.base_repository import BaseRepository


class GadgetRepository(BaseRepository[Gadget]):
    """Gadget-specific queries on top of the generic keyed map."""

    def __init__(self, session):
        super().__init__(session, Gadget)

    async def swap_availability(
        self,
        id: str,
        *,
        expected: bool,
        rented_by: str | None,
        updated_at: datetime,
    ) -> Gadget | None:
        """
        Set availability to `not expected` only if it currently equals `expected`.
        Returns the updated gadget, or None when the row is missing or in the other state.
        """
        result = await self.session.execute(
            update(Gadget)
            .where(Gadget.id == id, Gadget.availability == expected)
            .values(availability=not expected, rented_by=rented_by, updated_at=updated_at)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        return await self.get_by_id(id, refresh=True)
