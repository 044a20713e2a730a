# Standard library imports
from typing import Optional

# Local application imports
from ..processing.models import FaceAnalysisProvider
from .base_container import BaseContainer
from .providers import (
    ComparisonProvider,
    ModelProvider,
    WidgetProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Face models (ModelProvider)
    2. Comparison services (ComparisonProvider) - depend on the models
    3. Widgets and use cases (WidgetProvider) - depend on comparison services
    """

    def __init__(self, face_provider: Optional[FaceAnalysisProvider] = None) -> None:
        super().__init__()
        self.setup(face_provider)

    def setup(self, face_provider: Optional[FaceAnalysisProvider] = None) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: models → comparison → widgets
        """
        ModelProvider.register(self, face_provider)
        ComparisonProvider.register(self)
        WidgetProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (None resets it to be rebuilt lazily)"""
    global _container
    _container = container
