from .model_provider import ModelProvider
from .comparison_provider import ComparisonProvider
from .widget_provider import WidgetProvider


__all__ = [
    "ModelProvider",
    "ComparisonProvider",
    "WidgetProvider",
]
