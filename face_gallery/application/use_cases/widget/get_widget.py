# Local application imports
from ...dto.mappers import to_widget_response
from ...dto.widget_dto import WidgetResponse
from ...services.widget_service import WidgetRegistry


class GetWidgetUseCase:
    """Use case for getting a widget by ID"""

    def __init__(self, widget_registry: WidgetRegistry) -> None:
        self.widget_registry = widget_registry

    async def execute(self, widget_id: str) -> WidgetResponse:
        """
        Get a widget by ID

        Raises:
            ValueError: If widget not found
        """
        widget = self.widget_registry.get(widget_id)
        if widget is None:
            raise ValueError("Widget not found")
        return to_widget_response(widget)
