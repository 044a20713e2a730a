from typing import TYPE_CHECKING
from ...processing.matching import MatchPolicy
from ...processing.models import ModelLoader
from ...application.services.comparison_service import ComparisonService
from ...application.services.widget_service import WidgetRegistry, WidgetService
from ...application.use_cases.models import GetModelStatusUseCase, LoadModelsUseCase
from ...application.use_cases.widget import (
    CreateWidgetUseCase,
    DeleteWidgetUseCase,
    GetWidgetUseCase,
    ListWidgetsUseCase,
    RefreshWidgetUseCase,
    UpdateWidgetInputsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class WidgetProvider:
    """Widget use case provider - registers the widget registry and all widget/model use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register widget services and use cases (depends on ComparisonProvider).
        Use cases are created on-demand via factories.
        """
        registry = WidgetRegistry()
        container.register_singleton(WidgetRegistry, registry)
        container.register_singleton(
            WidgetService,
            WidgetService(registry=registry, comparison_service=container.get(ComparisonService)),
        )

        container.register_factory(
            CreateWidgetUseCase,
            lambda: CreateWidgetUseCase(widget_service=container.get(WidgetService))
        )
        container.register_factory(
            GetWidgetUseCase,
            lambda: GetWidgetUseCase(widget_registry=container.get(WidgetRegistry))
        )
        container.register_factory(
            ListWidgetsUseCase,
            lambda: ListWidgetsUseCase(widget_registry=container.get(WidgetRegistry))
        )
        container.register_factory(
            UpdateWidgetInputsUseCase,
            lambda: UpdateWidgetInputsUseCase(widget_service=container.get(WidgetService))
        )
        container.register_factory(
            RefreshWidgetUseCase,
            lambda: RefreshWidgetUseCase(widget_service=container.get(WidgetService))
        )
        container.register_factory(
            DeleteWidgetUseCase,
            lambda: DeleteWidgetUseCase(widget_registry=container.get(WidgetRegistry))
        )

        # Model status / loading live here because loading refreshes widgets
        container.register_factory(
            GetModelStatusUseCase,
            lambda: GetModelStatusUseCase(
                model_loader=container.get(ModelLoader),
                match_policy=container.get(MatchPolicy),
            )
        )
        container.register_factory(
            LoadModelsUseCase,
            lambda: LoadModelsUseCase(
                model_loader=container.get(ModelLoader),
                widget_service=container.get(WidgetService),
                get_model_status=container.get(GetModelStatusUseCase),
            )
        )
