"""Chart rendering for ranking reports."""

from charts.histogram import chart_filename, render_histogram

__all__ = ["chart_filename", "render_histogram"]
