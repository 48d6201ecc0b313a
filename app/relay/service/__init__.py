"""
Relay service module.
"""

from .relay_service import RelayService

__all__ = ["RelayService"]
