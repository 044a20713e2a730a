from .get_model_status import GetModelStatusUseCase
from .load_models import LoadModelsUseCase

__all__ = ["GetModelStatusUseCase", "LoadModelsUseCase"]
