# Local application imports
from ...dto.comparison_dto import ComparisonResponse
from ...dto.mappers import to_comparison_response
from ...services.widget_service import WidgetService


class RefreshWidgetUseCase:
    """Use case for re-running a widget's comparison"""

    def __init__(self, widget_service: WidgetService) -> None:
        self.widget_service = widget_service

    async def execute(self, widget_id: str) -> ComparisonResponse:
        """
        Re-run the comparison of a widget

        Returns:
            ComparisonResponse of this run (status "superseded" if a newer run committed first)

        Raises:
            ValueError: If widget not found
        """
        result = await self.widget_service.refresh(widget_id)
        return to_comparison_response(result)
