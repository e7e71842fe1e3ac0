import logging
from collections.abc import Sequence
from pathlib import Path

from cilog_common.datasource import Datasource
from cilog_datasources.buildbot import BuildbotDatasource

from .config import DEFAULT_TAIL, default_output_dir

logger = logging.getLogger(__name__)


def download_logs(
    sources: Sequence[Datasource] | None = None,
    output_dir: str | Path | None = None,
    tail: int = DEFAULT_TAIL,
    verbose: bool = False,
) -> Path:
    """
    Sync the last `tail` builds' logs of every source out to output_dir.

    Args:
        sources: Datasources to mirror, in order (default: one buildbot
            source pointed at the official build server)
        output_dir: Root directory (default: CI_LOGS_DIR or ~/.ci/logs)
        tail: Number of most recent builds per builder to mirror
        verbose: Narrate progress at INFO level

    Returns:
        Path: The output root directory

    Each source writes under a subdirectory named after its class. Errors
    from a source propagate and stop the sync.
    """
    if sources is None:
        sources = [BuildbotDatasource()]
    output_dir = Path(output_dir) if output_dir is not None else default_output_dir()

    if verbose:
        logger.info(f"Downloading the last {tail} logs from {len(sources)} source(s)")

    for source in sources:
        source.download_logs(output_dir / source.name, tail=tail, verbose=verbose)

    return output_dir
