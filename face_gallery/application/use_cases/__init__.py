from .comparison import RunComparisonUseCase
from .models import GetModelStatusUseCase, LoadModelsUseCase
from .widget import (
    CreateWidgetUseCase,
    DeleteWidgetUseCase,
    GetWidgetUseCase,
    ListWidgetsUseCase,
    RefreshWidgetUseCase,
    UpdateWidgetInputsUseCase,
)

__all__ = [
    "RunComparisonUseCase",
    "GetModelStatusUseCase",
    "LoadModelsUseCase",
    "CreateWidgetUseCase",
    "DeleteWidgetUseCase",
    "GetWidgetUseCase",
    "ListWidgetsUseCase",
    "RefreshWidgetUseCase",
    "UpdateWidgetInputsUseCase",
]
