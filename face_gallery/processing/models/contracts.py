"""
Model Data Contracts
--------------------

Defines the interface a face-analysis provider must implement.
These contracts are frozen - they define the stable API between the external
face-analysis library and the comparison pipeline.
"""

from typing import Any, List, Protocol

import numpy as np


class FaceAnalysisProvider(Protocol):
    """
    Protocol defining what the comparison pipeline needs from a face-analysis library.

    Both methods are blocking and are called from worker threads.
    """

    def model_ids(self) -> dict:
        """
        Return the model to load for each capability.

        Returns:
            Mapping of capability name (see domain.constants) to model identifier
        """
        ...

    def load(self, capability: str, model_id: str) -> Any:
        """
        Load one capability's model.

        Args:
            capability: Capability name (face_detector, landmark_predictor, descriptor_extractor)
            model_id: Model identifier understood by the library

        Returns:
            Loaded model handle

        Raises:
            Exception: Any loading failure propagates to the caller
        """
        ...

    def describe_faces(self, image: np.ndarray) -> List[np.ndarray]:
        """
        Detect, align and embed every face in a decoded image.

        Args:
            image: Decoded image (HxWx3 uint8, BGR)

        Returns:
            One descriptor per detected face, in detector order; empty if none found
        """
        ...
