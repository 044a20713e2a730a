# Standard library imports
import logging

# Local application imports
from ...dto.mappers import to_widget_response
from ...dto.widget_dto import WidgetCreateRequest, WidgetResponse
from ...services.widget_service import WidgetService

logger = logging.getLogger(__name__)


class CreateWidgetUseCase:
    """Use case for creating a comparison widget"""

    def __init__(self, widget_service: WidgetService) -> None:
        self.widget_service = widget_service

    async def execute(self, request: WidgetCreateRequest) -> WidgetResponse:
        """
        Create a widget and run its first comparison

        Args:
            request: Widget creation request

        Returns:
            WidgetResponse with the state after the first run

        Raises:
            ValueError: If the widget ID is already taken or inputs are invalid
        """
        widget = self.widget_service.registry.create(
            main_image=request.main_image,
            gallery=request.gallery,
            widget_id=request.id,
        )
        logger.info(f"Created widget {widget.id} with {len(widget.gallery)} gallery image(s)")

        if widget.can_compare:
            await self.widget_service.refresh(widget.id)
        return to_widget_response(widget)
