"""
Domain errors for gadget operations.
Mapped to plain-text HTTP responses by the handler registered in main.create_app.
"""

from fastapi import status


class GadgetError(Exception):
    """Base class. Carries the HTTP status the API reports it with."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, gadget_id: str, message: str):
        super().__init__(message)
        self.gadget_id = gadget_id
        self.message = message


class GadgetNotFoundError(GadgetError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, gadget_id: str):
        super().__init__(gadget_id, f"Gadget with id={gadget_id} not found")


class GadgetDeleteNotFoundError(GadgetError):
    """Delete of a missing id. Same message as GadgetNotFoundError, reported as 400."""

    def __init__(self, gadget_id: str):
        super().__init__(gadget_id, f"Gadget with id={gadget_id} not found")


class GadgetNotAvailableError(GadgetError):
    def __init__(self, gadget_id: str):
        super().__init__(gadget_id, f"Gadget with id={gadget_id} is not available")


class GadgetNotRentedError(GadgetError):
    def __init__(self, gadget_id: str):
        super().__init__(gadget_id, f"Gadget with id={gadget_id} is not rented")
