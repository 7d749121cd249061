"""CLI argument parsing and handling."""

from __future__ import annotations

from searchprobe.cli.parsing import apply_cli_overrides, parse_bool, parse_list

__all__ = ["apply_cli_overrides", "parse_bool", "parse_list"]
