"""
Data models for the buildbot REST API.

These models represent the objects returned by the upstream server,
reduced to the fields the log traversal needs. Unknown keys in the
server's JSON are ignored.
"""

from dataclasses import dataclass
from typing import Any

# Builders outside these families produce no logs worth mirroring
BUILDER_PREFIXES = ("package_", "tester_")


@dataclass
class Builder:
    """A named build configuration (e.g. one OS/architecture target)."""

    name: str
    builderid: int

    @property
    def is_mirrored(self) -> bool:
        """Whether this builder's logs are part of a sync."""
        return self.name.startswith(BUILDER_PREFIXES)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Builder":
        return cls(name=data["name"], builderid=int(data["builderid"]))


@dataclass
class Build:
    """One execution of a builder."""

    buildid: int
    complete: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Build":
        return cls(buildid=int(data["buildid"]), complete=bool(data.get("complete")))


@dataclass
class Step:
    """One phase of a build, identified by its ordinal within the build."""

    number: int
    complete: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Step":
        return cls(number=int(data["number"]), complete=bool(data.get("complete")))


@dataclass
class Log:
    """A log attached to a build step."""

    logid: int
    complete: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Log":
        return cls(logid=int(data["logid"]), complete=bool(data.get("complete")))


@dataclass
class LogChunk:
    """
    A unit of log content returned by the server.

    Every line of ``content`` starts with a one-character stream tag
    (stdin, stdout, stderr or header).
    """

    content: str

    def detagged(self) -> str:
        """Return the content with the stream tag stripped from every line."""
        return "\n".join(line[1:] for line in self.content.split("\n"))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogChunk":
        return cls(content=data.get("content", ""))
