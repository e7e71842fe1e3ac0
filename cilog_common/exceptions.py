"""Error types raised while mirroring CI logs."""


class FetchError(Exception):
    """All attempts to GET a URL failed."""

    def __init__(self, url: str):
        super().__init__(f"Unable to GET {url}")
        self.url = url


class BuilderNotFound(KeyError):
    """A builder name is not present in a datasource's builder mapping."""

    def __init__(self, builder_name: str):
        super().__init__(builder_name)
        self.builder_name = builder_name

    def __str__(self) -> str:
        return f"Unknown builder: {self.builder_name}"
