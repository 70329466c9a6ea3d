# solar_winds_api/exceptions.py

from fastapi import status


class DomainError(Exception):
    """Base class for all domain-level exceptions."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Not Found Errors ---

class NotFoundError(DomainError):
    """Raised when a resource cannot be found by its identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"

    def __init__(self, resource: str, key: str, value: object):
        self.resource = resource
        super().__init__(f"{resource} with {key} {value} not found")


# --- Conflict Errors ---

class ConflictError(DomainError):
    """Raised when a write would break a uniqueness or reference constraint."""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"


class DuplicateError(ConflictError):
    """Raised when creating/updating a row with a unique value already in use."""

    code = "duplicate"

    def __init__(self, resource: str, field: str):
        self.resource = resource
        self.field = field
        super().__init__(f"{resource} with this {field} already exists")


class AddressInUseError(ConflictError):
    """Raised when deleting an address that sensors are still installed at."""

    code = "address_in_use"

    def __init__(self, address_uuid: object, sensor_count: int):
        super().__init__(
            f"Address {address_uuid} is still the equipment address of {sensor_count} sensor(s)"
        )


# --- Validation Errors ---

class InvalidAddressOwnerError(DomainError, ValueError):
    """
    Raised when an address references neither or both of a user and a sensor.
    """

    code = "invalid_address_owner"
