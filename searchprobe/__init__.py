"""searchprobe - browser-driven acceptance checks for a search workflow."""

from __future__ import annotations

__version__ = "0.1.0"
