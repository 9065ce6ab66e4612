# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from gadget_registry.db.repositories.gadget_repository import GadgetRepository

__all__ = ["GadgetRepository"]
