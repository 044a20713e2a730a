"""Server-rendered HTML for comparison widgets."""
from .widget_page import NO_MATCHES_TEXT, render_widget_page

__all__ = ["NO_MATCHES_TEXT", "render_widget_page"]
