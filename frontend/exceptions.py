"""
Exceptions raised by the molecule sync source.

All of them are contained by the sync scheduler: a failed cycle is logged and
the previous dataset stays authoritative.
"""


class SyncError(Exception):
    """Base exception for a failed sync cycle"""
    pass


class NetworkFailure(SyncError):
    """Transport-level failure (timeout, DNS, connection refused)"""
    pass


class UnexpectedContentType(SyncError):
    """The endpoint answered with something other than JSON, usually an HTML page"""

    def __init__(self, content_type, excerpt=''):
        self.content_type = content_type
        self.excerpt = excerpt
        super().__init__(
            f"Expected JSON but received '{content_type or 'no content type'}': {excerpt!r}"
        )


class HttpError(SyncError):
    """Non-success HTTP status"""

    def __init__(self, status):
        self.status = status
        super().__init__(f"HTTP error! status: {status}")


class MalformedEnvelope(SyncError):
    """Body is not ``{success: true, data: [...]}``"""
    pass
