"""Terminal presentation for weather records and help pages."""

from .display import build_renderables, display, format_wind
from .help import render_help, render_version

__all__ = ["build_renderables", "display", "format_wind", "render_help", "render_version"]
