"""
CI Log Sync module.

Entry point for mirroring logs from one or more datasources to disk, plus
the ci-logs command-line interface built on top of it.
"""

from .sync import download_logs

__all__ = ["download_logs"]
