from .create_widget import CreateWidgetUseCase
from .get_widget import GetWidgetUseCase
from .list_widgets import ListWidgetsUseCase
from .update_widget import UpdateWidgetInputsUseCase
from .refresh_widget import RefreshWidgetUseCase
from .delete_widget import DeleteWidgetUseCase

__all__ = [
    "CreateWidgetUseCase",
    "GetWidgetUseCase",
    "ListWidgetsUseCase",
    "UpdateWidgetInputsUseCase",
    "RefreshWidgetUseCase",
    "DeleteWidgetUseCase",
]
