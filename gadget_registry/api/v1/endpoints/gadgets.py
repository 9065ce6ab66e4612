"""
Gadget endpoints - RESTful resource with rent/return actions.
Design: Thin controller; service layer holds business logic and raises domain errors,
which main.create_app turns into plain-text 404/400 responses.
"""

from fastapi import APIRouter

from gadget_registry.db.session import DbSession
from gadget_registry.db.repositories.gadget_repository import GadgetRepository
from gadget_registry.services.gadget_service import GadgetService
from gadget_registry.schemas.gadget import GadgetCreate, GadgetResponse, RentRequest

router = APIRouter()


def _get_gadget_service(session: DbSession) -> GadgetService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return GadgetService(GadgetRepository(session))


@router.post("", response_model=GadgetResponse)
async def create_gadget(session: DbSession, data: GadgetCreate):
    """List a new gadget for rent. Server assigns id and createdAt."""
    svc = _get_gadget_service(session)
    return await svc.create(data)


@router.get("", response_model=list[GadgetResponse])
async def list_gadgets(session: DbSession):
    """All gadgets, rented or not."""
    svc = _get_gadget_service(session)
    return await svc.list_gadgets()


@router.get("/{gadget_id}", response_model=GadgetResponse)
async def get_gadget(session: DbSession, gadget_id: str):
    svc = _get_gadget_service(session)
    return await svc.get_by_id(gadget_id)


@router.post("/{gadget_id}/rent", response_model=GadgetResponse)
async def rent_gadget(session: DbSession, gadget_id: str, data: RentRequest):
    """Rent an available gadget. 400 if it is already rented."""
    svc = _get_gadget_service(session)
    return await svc.rent(gadget_id, data.renter)


@router.post("/{gadget_id}/return", response_model=GadgetResponse)
async def return_gadget(session: DbSession, gadget_id: str):
    """Return a rented gadget. 400 if it is not rented."""
    svc = _get_gadget_service(session)
    return await svc.return_gadget(gadget_id)


@router.delete("/{gadget_id}", response_model=GadgetResponse)
async def delete_gadget(session: DbSession, gadget_id: str):
    """Delete gadget and return it. A missing id is reported as 400."""
    svc = _get_gadget_service(session)
    return await svc.delete(gadget_id)
