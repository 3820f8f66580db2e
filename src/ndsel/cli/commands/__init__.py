"""ndsel command modules."""

from .select import select
from .zcat import zcat

__all__ = ["select", "zcat"]
