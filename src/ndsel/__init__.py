"""ndsel: field selection and parallel gunzip for NDJSON streams."""

from .errors import NdselError

__all__ = ["__version__", "NdselError"]

__version__ = "0.1.0"
