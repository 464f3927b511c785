"""Report renderers for counted files."""

from .json_report import build_report, render_json_report
from .stdout import StdoutReporter, render_processing_line

__all__ = ["StdoutReporter", "build_report", "render_json_report", "render_processing_line"]
