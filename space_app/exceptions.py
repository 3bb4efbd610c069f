class ShipServiceError(Exception):
    """Base class for the errors the ship core reports to its caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ShipServiceError):
    """Missing or out-of-range field, or a malformed id."""


class NotFound(ShipServiceError):
    """No ship stored under the requested id."""
