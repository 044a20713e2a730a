"""
Model Manager
-------------

Manages model loading and caching.
Provides a single interface for loading capability models regardless of which
face-analysis library sits behind the provider.
"""

import threading
from typing import Any, Dict, Tuple

from face_gallery.domain.constants import CAPABILITY_DESCRIPTOR_EXTRACTOR
from face_gallery.processing.models.contracts import FaceAnalysisProvider


def cache_key(capability: str, model_id: str) -> Tuple[str, str]:
    """
    Cache key for a capability model.

    Detector and landmark capabilities share the same model in DeepFace, so
    both map onto the detector key.
    """
    kind = "recognition" if capability == CAPABILITY_DESCRIPTOR_EXTRACTOR else "detection"
    return kind, model_id


class ModelManager:
    """
    Manages model loading and caching.

    Loads are called from worker threads; a per-key lock makes sure the same
    model is never built twice when two capabilities resolve to it.
    """

    def __init__(self, provider: FaceAnalysisProvider):
        """Initialize model manager with empty cache."""
        self._provider = provider
        self._cache: Dict[Tuple[str, str], Any] = {}
        self._locks: Dict[Tuple[str, str], threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, key: Tuple[str, str]) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def load_model(self, capability: str, model_id: str) -> Any:
        """
        Load a capability model, using cache if available.

        Args:
            capability: Capability name
            model_id: Model identifier

        Returns:
            Loaded model handle

        Raises:
            Exception: Provider failures propagate; nothing is cached on failure
        """
        key = cache_key(capability, model_id)
        with self._lock_for(key):
            if key in self._cache:
                return self._cache[key]
            model = self._provider.load(capability, model_id)
            self._cache[key] = model
            return model
