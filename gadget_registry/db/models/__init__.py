from gadget_registry.db.models.gadget import Gadget

__all__ = ["Gadget"]
