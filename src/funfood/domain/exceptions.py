"""Domain exception hierarchy."""


class FunFoodError(Exception):
    """Base class for all errors raised by the client core."""


class ValidationError(FunFoodError, ValueError):
    """An argument failed validation (e.g. a negative quantity)."""


class RemoteFailure(FunFoodError):
    """A remote collaborator (API, network) failed.

    Timeouts raised by the HTTP layer are reported through this error too.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PersistenceFailure(FunFoodError):
    """The key-value storage collaborator failed to read or write."""


class GeolocationError(FunFoodError):
    """Current location is unavailable or permission was denied."""


class StaleResponseDiscarded(FunFoodError):
    """A response belongs to a superseded request and was ignored.

    Used internally by the list query coordinator; never reaches callers.
    """

    def __init__(self, sequence: int, latest: int):
        super().__init__(f"Response #{sequence} superseded by request #{latest}")
        self.sequence = sequence
        self.latest = latest
