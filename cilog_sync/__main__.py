"""
Standalone entrypoint for the log sync.

Usage:
    python -m cilog_sync [OPTIONS] COMMAND [ARGS]...
    ci-logs [OPTIONS] COMMAND [ARGS]...  (after pip install)
"""

from cilog_sync.cli import main

if __name__ == "__main__":
    main()
