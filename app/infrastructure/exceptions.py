"""
Custom exceptions for the Infrastructure layer.
"""

class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class SchemaInitError(InfrastructureError):
    """Raised when the tables cannot be created at startup."""
    pass


class StoreOperationError(InfrastructureError):
    """
    A statement failed inside the store.

    ``message`` keeps the driver's own text so it can be handed back to the caller.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
