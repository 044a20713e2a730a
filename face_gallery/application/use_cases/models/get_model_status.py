# Local application imports
from ....processing.matching import MatchPolicy
from ....processing.models import ModelLoader
from ...dto.model_dto import ModelStatusResponse


class GetModelStatusUseCase:
    """Use case for reporting face model readiness"""

    def __init__(self, model_loader: ModelLoader, match_policy: MatchPolicy) -> None:
        self.model_loader = model_loader
        self.match_policy = match_policy

    async def execute(self) -> ModelStatusResponse:
        readiness = self.model_loader.readiness
        return ModelStatusResponse(
            state=readiness.state.value,
            ready=readiness.is_ready,
            error=readiness.error,
            capabilities=self.model_loader.capabilities(),
            policy=self.match_policy.name,
            threshold=self.match_policy.threshold,
        )
