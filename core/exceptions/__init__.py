"""
Custom exceptions for the request service.
"""

from .business_exception import BusinessException
from .service_exceptions import (
    RequestFailedException,
    UpstreamConfigException,
)

__all__ = [
    "BusinessException",
    "RequestFailedException",
    "UpstreamConfigException",
]
