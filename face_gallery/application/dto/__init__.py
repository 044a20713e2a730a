from .comparison_dto import ComparisonRequest, ComparisonResponse, ImageMatchResponse
from .widget_dto import (
    GalleryUpdateRequest,
    MainImageUpdateRequest,
    WidgetCreateRequest,
    WidgetResponse,
)
from .model_dto import ModelStatusResponse
from .mappers import to_comparison_response, to_widget_response

__all__ = [
    "ComparisonRequest",
    "ComparisonResponse",
    "ImageMatchResponse",
    "GalleryUpdateRequest",
    "MainImageUpdateRequest",
    "WidgetCreateRequest",
    "WidgetResponse",
    "ModelStatusResponse",
    "to_comparison_response",
    "to_widget_response",
]
