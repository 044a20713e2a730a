# Standard library imports
from typing import List

# Local application imports
from ...dto.mappers import to_widget_response
from ...dto.widget_dto import WidgetResponse
from ...services.widget_service import WidgetRegistry


class ListWidgetsUseCase:
    """Use case for listing all widgets"""

    def __init__(self, widget_registry: WidgetRegistry) -> None:
        self.widget_registry = widget_registry

    async def execute(self) -> List[WidgetResponse]:
        return [to_widget_response(widget) for widget in self.widget_registry.list()]
