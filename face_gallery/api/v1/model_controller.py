# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.model_dto import ModelStatusResponse
from ...application.use_cases.models import GetModelStatusUseCase, LoadModelsUseCase
from ...di.container import get_container


router = APIRouter(tags=["models"])


@router.get("/status", response_model=ModelStatusResponse)
async def get_model_status() -> ModelStatusResponse:
    """
    Get the readiness of the face models

    Returns:
        ModelStatusResponse with state ("pending", "loading", "ready", "failed")
    """
    container = get_container()
    get_model_status_use_case = container.get(GetModelStatusUseCase)
    return await get_model_status_use_case.execute()


@router.post("/load", response_model=ModelStatusResponse)
async def load_models() -> ModelStatusResponse:
    """
    Load the face models.

    Returns immediately with the current state if they are already ready or
    a load is in progress. A failed load can be retried by calling this again.
    """
    container = get_container()
    load_models_use_case = container.get(LoadModelsUseCase)
    return await load_models_use_case.execute()
