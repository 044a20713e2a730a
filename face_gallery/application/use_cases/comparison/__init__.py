from .run_comparison import RunComparisonUseCase

__all__ = ["RunComparisonUseCase"]
