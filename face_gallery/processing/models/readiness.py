"""
Model Readiness
---------------

Explicit readiness gate for the face-analysis models. One gate is owned by one
ModelLoader and handed to every consumer that must not run before the models
are loaded. Independent gates never affect each other.
"""

from enum import Enum
from typing import Optional


class ReadinessState(str, Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ModelReadiness:
    """Tracks whether the models behind one loader are ready for use."""

    def __init__(self) -> None:
        self._state = ReadinessState.PENDING
        self._error: Optional[str] = None

    @property
    def state(self) -> ReadinessState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_ready(self) -> bool:
        return self._state == ReadinessState.READY

    @property
    def is_loading(self) -> bool:
        return self._state == ReadinessState.LOADING

    def mark_loading(self) -> None:
        self._state = ReadinessState.LOADING
        self._error = None

    def mark_ready(self) -> None:
        self._state = ReadinessState.READY
        self._error = None

    def mark_failed(self, error: str) -> None:
        self._state = ReadinessState.FAILED
        self._error = error
