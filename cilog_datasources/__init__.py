"""
CI Log Datasources module.

Concrete datasources that know how to walk one kind of CI server.
Currently supports buildbot, but can be extended to other backends by
implementing cilog_common.Datasource.
"""

from .buildbot import DEFAULT_API_BASE, BuildbotDatasource, select_tail

__all__ = ["BuildbotDatasource", "DEFAULT_API_BASE", "select_tail"]
