"""
HTTP request helpers and their result model.
"""

from .http_result import (
    Err,
    HttpResult,
    Ok,
    ShapeMismatch,
    StatusFailure,
    TransportFailure,
    render,
    unwrap,
)
from .http_util import (
    HttpUtil,
    execute,
    execute_sync,
    http,
    http_request,
    http_request_sync,
)

__all__ = [
    "Err",
    "HttpResult",
    "Ok",
    "ShapeMismatch",
    "StatusFailure",
    "TransportFailure",
    "render",
    "unwrap",
    "HttpUtil",
    "execute",
    "execute_sync",
    "http",
    "http_request",
    "http_request_sync",
]
