# Standard library imports
from typing import List, Optional

# Local application imports
from ...dto.mappers import to_widget_response
from ...dto.widget_dto import WidgetResponse
from ...services.widget_service import WidgetService


class UpdateWidgetInputsUseCase:
    """Use case for replacing a widget's main image or gallery"""

    def __init__(self, widget_service: WidgetService) -> None:
        self.widget_service = widget_service

    async def execute(
        self,
        widget_id: str,
        main_image: Optional[str] = None,
        gallery: Optional[List[str]] = None,
    ) -> WidgetResponse:
        """
        Replace the given inputs and re-run the comparison

        Args:
            widget_id: ID of the widget
            main_image: New main image reference (unchanged if None)
            gallery: New gallery references (unchanged if None)

        Returns:
            WidgetResponse with the state after the run

        Raises:
            ValueError: If widget not found or main image is empty
        """
        await self.widget_service.update_inputs(widget_id, main_image=main_image, gallery=gallery)
        widget = self.widget_service.registry.get(widget_id)
        if widget is None:
            raise ValueError("Widget not found")
        return to_widget_response(widget)
