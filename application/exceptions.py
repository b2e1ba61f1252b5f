"""
Application-layer exceptions.

These exceptions are shared across the application and infrastructure
layers. Routers translate them into HTTP responses; the importer catches
them per muscle group.
"""

from typing import Optional


class ExerciseCatalogError(Exception):
    """Base exception for exercise catalog errors."""

    pass


class UpstreamError(ExerciseCatalogError):
    """Raised when the upstream provider fails or returns a non-2xx status.

    status_code is None when no HTTP response was received (DNS failure,
    refused connection, reset).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamTimeout(UpstreamError):
    """Raised when an upstream call exceeds its deadline."""

    def __init__(self, message: str):
        super().__init__(message, status_code=None)


class ExerciseNotFound(ExerciseCatalogError):
    """Raised when an external id does not exist upstream."""

    def __init__(self, external_id: str):
        super().__init__(f"Exercise '{external_id}' not found")
        self.external_id = external_id


class ImportGroupFailure(ExerciseCatalogError):
    """A single muscle group failed to import.

    Recorded in the import report; never aborts the overall sweep.
    """

    def __init__(self, group: str, cause: BaseException):
        super().__init__(f"Import failed for muscle group '{group}': {cause}")
        self.group = group
        self.cause = cause


class ImportAlreadyRunning(ExerciseCatalogError):
    """Raised when an import sweep is requested while another is in flight."""

    pass


class CatalogStoreError(ExerciseCatalogError):
    """Raised when the catalog store cannot complete a read or write."""

    pass
