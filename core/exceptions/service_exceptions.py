from typing import TYPE_CHECKING

from .business_exception import BusinessException

if TYPE_CHECKING:
    from core.util.http_result import Failure


class RequestFailedException(BusinessException):
    """Raised when an upstream request ends in a failure result."""

    def __init__(self, failure: "Failure"):
        self.failure = failure
        self.kind = failure.kind

        status_code = 502
        if failure.kind == "status" and 400 <= failure.status_code < 600:
            status_code = failure.status_code

        super().__init__(
            status_code=status_code,
            message=str(failure)
        )


class UpstreamConfigException(BusinessException):
    """Raised when a required setting is missing from the environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            status_code=500,
            message=f"Missing required configuration: {name}"
        )
