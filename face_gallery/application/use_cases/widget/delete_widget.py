# Local application imports
from ...services.widget_service import WidgetRegistry


class DeleteWidgetUseCase:
    """Use case for removing a widget"""

    def __init__(self, widget_registry: WidgetRegistry) -> None:
        self.widget_registry = widget_registry

    async def execute(self, widget_id: str) -> None:
        """
        Remove a widget

        Raises:
            ValueError: If widget not found
        """
        if not self.widget_registry.remove(widget_id):
            raise ValueError("Widget not found")
