# Standard library imports
import logging

# Local application imports
from ....processing.models import ModelLoader
from ...dto.model_dto import ModelStatusResponse
from ...services.widget_service import WidgetService
from .get_model_status import GetModelStatusUseCase

logger = logging.getLogger(__name__)


class LoadModelsUseCase:
    """
    Use case for loading the face models.

    Once the models become ready, every widget with inputs is refreshed, so
    widgets created before the models finished loading get their first run.
    """

    def __init__(
        self,
        model_loader: ModelLoader,
        widget_service: WidgetService,
        get_model_status: GetModelStatusUseCase,
    ) -> None:
        self.model_loader = model_loader
        self.widget_service = widget_service
        self.get_model_status = get_model_status

    async def execute(self) -> ModelStatusResponse:
        """
        Load the models (no-op if already ready or loading)

        Returns:
            ModelStatusResponse after the attempt
        """
        was_ready = self.model_loader.readiness.is_ready
        await self.model_loader.load()
        if self.model_loader.readiness.is_ready and not was_ready:
            await self.widget_service.refresh_all()
        return await self.get_model_status.execute()
