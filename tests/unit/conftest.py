"""Shared fixtures for the unit tests: an in-memory buildbot API."""

from unittest.mock import patch

import pytest

from cilog_common.exceptions import FetchError

API_BASE = "http://buildbot.test/api/v2"


class FakeBuildbotAPI:
    """Stands in for get_json, answering from a table of canned responses."""

    def __init__(self, api_base: str = API_BASE):
        self.api_base = api_base
        self.responses: dict[str, object] = {}
        self.calls: list[str] = []

    def add(self, path: str, payload) -> None:
        self.responses[f"{self.api_base}/{path}"] = payload

    def add_builders(self, builders: dict[str, int]) -> None:
        self.add(
            "builders",
            {"builders": [{"name": n, "builderid": i} for n, i in builders.items()]},
        )

    def add_builds(self, builder_id: int, complete: list[int], incomplete=()) -> None:
        builds = [{"buildid": b, "complete": True} for b in complete]
        builds += [{"buildid": b, "complete": False} for b in incomplete]
        self.add(f"builders/{builder_id}/builds", {"builds": builds})

    def add_steps(self, build_id: int, complete: list[int], incomplete=()) -> None:
        steps = [{"number": s, "complete": True} for s in complete]
        steps += [{"number": s, "complete": False} for s in incomplete]
        self.add(f"builds/{build_id}/steps", {"steps": steps})

    def add_step_log(self, build_id: int, step: int, logid: int, chunks: list[str]):
        self.add(
            f"builds/{build_id}/steps/{step}/logs",
            {"logs": [{"logid": logid, "complete": True}]},
        )
        self.add(
            f"logs/{logid}/contents",
            {"logchunks": [{"content": c} for c in chunks]},
        )

    def fetched(self, fragment: str) -> list[str]:
        """URLs requested so far that contain fragment."""
        return [url for url in self.calls if fragment in url]

    def __call__(self, url: str, retries: int = 3, timeout: float = 30):
        self.calls.append(url)
        if url not in self.responses:
            raise FetchError(url)
        return self.responses[url]


@pytest.fixture
def fake_api():
    """Patch the buildbot datasource's fetcher with an empty FakeBuildbotAPI."""
    api = FakeBuildbotAPI()
    with patch("cilog_datasources.buildbot.get_json", side_effect=api):
        yield api


@pytest.fixture
def populated_api(fake_api):
    """
    A server with one mirrored builder holding complete builds 10-12.

    Every build has complete steps 1-3 (step 4 still running) and one log
    per step whose content names the build and step.
    """
    fake_api.add_builders({"package_linux64": 1, "docs_builder": 7})
    fake_api.add_builds(1, complete=[12, 10, 11], incomplete=[13])
    for build_id in (10, 11, 12):
        fake_api.add_steps(build_id, complete=[3, 1, 2], incomplete=[4])
        for step in (1, 2, 3):
            logid = build_id * 100 + step
            fake_api.add_step_log(
                build_id, step, logid, [f"obuild {build_id}\nostep {step}\n"]
            )
    return fake_api
