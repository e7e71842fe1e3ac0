"""
Log datasource for buildbot's v2 REST API.

The traversal walks builders -> builds -> steps -> logs -> log chunks and
flattens each step's logs into a single text file. A step whose file
already exists on disk is considered mirrored and is never fetched again.
"""

import logging
from pathlib import Path

from cilog_client.client import DEFAULT_RETRIES, DEFAULT_TIMEOUT, get_json
from cilog_common.datasource import Datasource
from cilog_common.exceptions import BuilderNotFound
from cilog_common.models import Build, Builder, Log, LogChunk, Step

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://build.julialang.org/api/v2"


def select_tail(build_ids: list[int], tail: int) -> list[int]:
    """Return the last `tail` entries of an ascending build ID list."""
    if tail <= 0:
        return []
    return build_ids[-tail:]


class BuildbotDatasource(Datasource):
    """
    Datasource backed by a buildbot instance.

    Holds the API base URL and a mapping of builder name (e.g.
    ``package_linux64``) to builder ID. The mapping is loaded on
    construction and can be refreshed with load_builders(); it is never
    assumed fresh beyond the last refresh.
    """

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        retries: int = DEFAULT_RETRIES,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the datasource and load its builders.

        Args:
            api_base: Base URL the API endpoints are located at
            retries: Extra attempts for each failed GET
            timeout: Seconds to wait for each response

        Raises:
            FetchError: If the builder list cannot be fetched
        """
        self.api_base = api_base.rstrip("/")
        self.retries = retries
        self.timeout = timeout
        self.builders: dict[str, int] = {}
        self.load_builders()

    def __repr__(self) -> str:
        return f"BuildbotDatasource(api_base={self.api_base!r})"

    def _get(self, path: str):
        return get_json(
            f"{self.api_base}/{path}", retries=self.retries, timeout=self.timeout
        )

    def load_builders(self) -> "BuildbotDatasource":
        """
        Load the mapping of builder name to builder ID.

        Only ``package_*`` and ``tester_*`` builders are kept. Any previous
        mapping is dropped, including builders that disappeared upstream.
        """
        data = self._get("builders")
        builders = [Builder.from_dict(b) for b in data["builders"]]

        self.builders.clear()
        for builder in builders:
            if builder.is_mirrored:
                self.builders[builder.name] = builder.builderid

        logger.debug(f"Loaded {len(self.builders)} builders from {self.api_base}")
        return self

    def get_builder_builds_list(self, builder: str | int) -> list[int]:
        """
        Given a builder name or ID, return the sorted IDs of its complete builds.

        Raises:
            BuilderNotFound: If a builder name is not in the mapping
        """
        if isinstance(builder, str):
            if builder not in self.builders:
                raise BuilderNotFound(builder)
            builder = self.builders[builder]

        data = self._get(f"builders/{builder}/builds")
        builds = [Build.from_dict(b) for b in data["builds"]]
        return sorted(b.buildid for b in builds if b.complete)

    def get_all_builder_builds(self) -> dict[str, list[int]]:
        """Return the complete build IDs of every builder in the mapping."""
        return {
            name: self.get_builder_builds_list(builder_id)
            for name, builder_id in self.builders.items()
        }

    def get_build_steps_list(self, build_id: int) -> list[int]:
        """Return the sorted numbers of a build's complete steps."""
        data = self._get(f"builds/{build_id}/steps")
        steps = [Step.from_dict(s) for s in data["steps"]]
        return sorted(s.number for s in steps if s.complete)

    def get_log_contents(self, build_id: int, step: int) -> str:
        """
        Fetch and concatenate every complete log of a build step.

        Logs are taken in the order the server lists them. Each chunk's
        stream tags are stripped before it is appended.
        """
        data = self._get(f"builds/{build_id}/steps/{step}/logs")
        logs = [Log.from_dict(entry) for entry in data["logs"]]

        content = ""
        for log in logs:
            if not log.complete:
                continue
            chunks = self._get(f"logs/{log.logid}/contents")["logchunks"]
            for chunk in chunks:
                content += LogChunk.from_dict(chunk).detagged()
        return content

    def download_logs(
        self, output_dir: Path, tail: int = 100, verbose: bool = False
    ) -> None:
        """
        Mirror the last `tail` complete builds of every builder to disk.

        Files are written to ``output_dir/<builder>/<build>/<step>.log``.
        Steps whose file already exists are skipped. A failed fetch aborts
        the traversal; files written before it stay on disk.
        """
        output_dir = Path(output_dir)
        level = logging.INFO if verbose else logging.DEBUG

        logger.log(level, f"Enumerating builds of {len(self.builders)} builders")
        all_builds = self.get_all_builder_builds()

        for builder_name, build_ids in all_builds.items():
            selected = select_tail(build_ids, tail)
            logger.log(
                level,
                f"{builder_name}: {len(selected)} of {len(build_ids)} builds selected",
            )

            for build_id in selected:
                build_dir = output_dir / builder_name / str(build_id)
                build_dir.mkdir(parents=True, exist_ok=True)

                steps = self.get_build_steps_list(build_id)
                logger.log(level, f"{builder_name}/{build_id}: {len(steps)} steps")

                for step in steps:
                    log_path = build_dir / f"{step}.log"
                    if log_path.exists():
                        continue

                    logger.log(level, f"Downloading {builder_name}/{build_id}/{step}")
                    # Not atomic: an interrupted write leaves a file that counts as done
                    log_path.write_text(
                        self.get_log_contents(build_id, step), encoding="utf-8"
                    )
