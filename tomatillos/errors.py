class TomatilloError(Exception):
    pass


class UnsupportedIdentifierError(TomatilloError, ValueError):
    """The content uri matches neither the movie collection nor a single movie."""

    def __init__(self, uri):
        super().__init__(f"Unknown uri: {uri}")
        self.uri = uri


class InvalidInputError(TomatilloError, ValueError):
    """Values handed to a write are missing or carry an out-of-range rating."""


class StorageInitError(TomatilloError, RuntimeError):
    """The movie table (or the file holding it) could not be created."""
