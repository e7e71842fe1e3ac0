"""
CI Log Common module.

This module contains shared domain models, the datasource interface and
the error types used across the log sync components (client, datasources,
sync).

The common module has no dependencies on other cilog_* modules, making it
a pure domain layer that can be imported by any component.
"""

from .datasource import Datasource
from .exceptions import BuilderNotFound, FetchError
from .models import Build, Builder, Log, LogChunk, Step

__all__ = [
    "Build",
    "Builder",
    "BuilderNotFound",
    "Datasource",
    "FetchError",
    "Log",
    "LogChunk",
    "Step",
]
