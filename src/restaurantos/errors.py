"""
Error taxonomy shared by the stores and the HTTP layer.

Lookups keep returning ``None``/``False`` for missing rows; these exceptions
cover the cases where the caller asked for something the store refuses to do.
"""


class RestaurantError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(RestaurantError):
    status_code = 404


class ValidationFailed(RestaurantError, ValueError):
    status_code = 400


class InvalidTransition(ValidationFailed):
    def __init__(self, entity: str, current: str, target: str):
        super().__init__(f"Illegal {entity} status transition: {current} -> {target}")
        self.entity = entity
        self.current = current
        self.target = target


class TransientIOFailure(RestaurantError):
    """The backing database failed in a way a retry may fix."""

    status_code = 503
    retry_after = 1
