"""Errors raised by the Drive repository layer.

Every failure leaving this layer is a DriveError carrying an ErrorKind, so
the route layer can translate it to a single response envelope.
"""

from enum import Enum


class ErrorKind(str, Enum):
    validation = "validation"
    not_found = "not_found"
    ambiguous = "ambiguous"
    permission = "permission"
    auth = "auth"
    configuration = "configuration"
    remote = "remote"


# HTTP status used by the route layer for each kind
ERROR_STATUS = {
    ErrorKind.validation: 400,
    ErrorKind.ambiguous: 400,
    ErrorKind.not_found: 404,
    ErrorKind.auth: 401,
    ErrorKind.permission: 403,
    ErrorKind.configuration: 500,
    ErrorKind.remote: 500,
}

ERROR_TITLES = {
    ErrorKind.validation: "Invalid request",
    ErrorKind.ambiguous: "Multiple matches found",
    ErrorKind.not_found: "Resource not found",
    ErrorKind.auth: "Authentication failed",
    ErrorKind.permission: "Permission denied",
    ErrorKind.configuration: "Configuration error",
    ErrorKind.remote: "Remote storage error",
}


class DriveError(Exception):
    """Base error for the repository layer."""

    kind: ErrorKind = ErrorKind.remote

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]

    @property
    def title(self) -> str:
        return ERROR_TITLES[self.kind]


class DriveValidationError(DriveError):
    """Raised before any remote call when the input is unusable."""

    kind = ErrorKind.validation


class DriveNotFoundError(DriveError):
    """Raised when a campaign, channel, folder or file does not exist."""

    kind = ErrorKind.not_found


class AmbiguousMatchError(DriveError):
    """Raised when a name lookup that must be unique matched several items."""

    kind = ErrorKind.ambiguous

    def __init__(self, message: str, matches: int):
        self.matches = matches
        super().__init__(message)


class DrivePermissionError(DriveError):
    kind = ErrorKind.permission


class DriveAuthError(DriveError):
    kind = ErrorKind.auth


class DriveConfigurationError(DriveError):
    """Raised when credentials or the workspace id are missing."""

    kind = ErrorKind.configuration


class RemoteStoreError(DriveError):
    """Unclassified failure reported by the remote store."""

    kind = ErrorKind.remote

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)
