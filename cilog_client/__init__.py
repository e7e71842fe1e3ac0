"""
CI Log Client module.

HTTP access to the upstream CI server's JSON API.
"""

from .client import get_json

__all__ = ["get_json"]
