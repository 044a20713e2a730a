"""Conversions from domain models to response DTOs."""

# Local application imports
from ...domain.models import ComparisonResult, ComparisonWidget
from .comparison_dto import ComparisonResponse, ImageMatchResponse
from .widget_dto import WidgetResponse


def to_comparison_response(result: ComparisonResult) -> ComparisonResponse:
    return ComparisonResponse(
        status=result.status.value,
        matched=list(result.matched),
        scores=[
            ImageMatchResponse(
                image_ref=score.image_ref,
                distance=score.distance,
                matched=score.matched,
                label=score.label,
            )
            for score in result.scores
        ],
        best_image=result.best_image,
        best_distance=result.best_distance,
        fallback_used=result.fallback_used,
        policy=result.policy,
        threshold=result.threshold,
    )


def to_widget_response(widget: ComparisonWidget) -> WidgetResponse:
    return WidgetResponse(
        id=widget.id,
        main_image=widget.main_image,
        gallery=list(widget.gallery),
        matched=list(widget.matched),
        generation=widget.generation,
        last_result=to_comparison_response(widget.last_result) if widget.last_result else None,
    )
