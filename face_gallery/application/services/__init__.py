from .comparison_service import ComparisonService
from .widget_service import DEFAULT_WIDGET_ID, WidgetRegistry, WidgetService

__all__ = [
    "ComparisonService",
    "DEFAULT_WIDGET_ID",
    "WidgetRegistry",
    "WidgetService",
]
