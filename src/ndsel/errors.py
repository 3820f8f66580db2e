"""Exception hierarchy shared by the ndsel engines.

Core modules raise these; only the CLI commands turn them into an
``Error: ...`` message and a nonzero exit status.
"""


class NdselError(Exception):
    """Base class for every error raised by ndsel."""

    pass


class ConfigurationError(NdselError):
    """Invalid run configuration, detected before any input is read."""

    pass


class PointerSyntaxError(ConfigurationError):
    """A field selector is not a valid JSON Pointer."""

    def __init__(self, pointer: str, reason: str):
        self.pointer = pointer
        self.reason = reason
        super().__init__(f"invalid JSON pointer {pointer!r}: {reason}")


class InputOpenError(NdselError):
    """An input file could not be opened."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"unable to open file {self.path}: {reason}")


class DecompressionError(NdselError):
    """A gzip input could not be opened or decoded."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to decompress {self.path}: {reason}")


class DocumentParseError(NdselError):
    """A line is not exactly one JSON document."""

    pass


class PointerResolutionError(NdselError):
    """A JSON Pointer does not select anything in a document."""

    def __init__(self, pointer: str, reason: str):
        self.pointer = pointer
        self.reason = reason
        super().__init__(f"{pointer!r}: {reason}")


__all__ = [
    "ConfigurationError",
    "DecompressionError",
    "DocumentParseError",
    "InputOpenError",
    "NdselError",
    "PointerResolutionError",
    "PointerSyntaxError",
]
