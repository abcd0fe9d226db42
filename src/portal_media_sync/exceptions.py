"""Exception hierarchy shared by the credential, HTTP, storage and sync layers."""


class PortalMediaError(Exception):
    """Base exception for all portal media operations."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class MissingCredentialError(PortalMediaError):
    """Raised when neither a token nor an identifier/key pair was supplied."""

    def __init__(self, message: str = "You need to specify either: token or id AND key"):
        super().__init__(message)


class RequestError(PortalMediaError):
    """Base exception for failed management API requests."""


class NotFoundError(RequestError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Resource not found: {url}")


class UnauthorizedError(RequestError):
    def __init__(self):
        super().__init__(
            "Unauthorized. Make sure you correctly specified management API access token."
        )


class ForbiddenError(RequestError):
    def __init__(self):
        super().__init__(
            "Looks like you are not allowed to perform this operation. "
            "Please check with your administrator."
        )


class UnhandledResponseError(RequestError):
    """Raised for any non-success status without a dedicated mapping."""

    def __init__(self, url: str, status: int, status_message: str):
        self.url = url
        self.status = status
        self.status_message = status_message
        super().__init__(
            f"Could not complete request to {url}. Status: {status} {status_message}"
        )


class TransportError(RequestError):
    """Raised when the request never produced a response (DNS, connection, TLS)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        super().__init__(f"Request to {url} failed: {cause}", cause=cause)


class ManagementApiError(PortalMediaError):
    """Raised when the management API answers with an unexpected payload."""


class PublishError(PortalMediaError):
    def __init__(self, cause: Exception):
        super().__init__(f"Unable to schedule website publishing. {cause}", cause=cause)


class MediaSyncError(PortalMediaError):
    """Base exception for bulk media transfers. Always wraps the failure that aborted it."""

    action = "process"

    def __init__(self, cause: Exception):
        super().__init__(f"Unable to {self.action} media files. {cause}", cause=cause)


class DownloadError(MediaSyncError):
    action = "download"


class UploadError(MediaSyncError):
    action = "upload"


class DeleteError(MediaSyncError):
    action = "delete"
