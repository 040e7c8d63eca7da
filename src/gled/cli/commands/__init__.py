"""CLI commands for gled."""

from .lighting import breathe, cycle, intro, solid

__all__ = ["breathe", "cycle", "intro", "solid"]
