"""
API clients for external services.
"""

from .upstream_api_client import UpstreamAPIClient

__all__ = ["UpstreamAPIClient"]
