"""Use cases composing console output."""

from __future__ import annotations

from .format_message import format_arguments, indent_lines, render_line

__all__ = ["format_arguments", "indent_lines", "render_line"]
