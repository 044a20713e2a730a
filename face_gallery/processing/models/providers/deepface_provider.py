"""
DeepFace Provider
-----------------

Face-analysis provider backed by DeepFace.
Detection, landmark alignment and descriptor embedding all happen inside
DeepFace; this module only maps our capabilities onto DeepFace calls.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from face_gallery.domain.constants import (
    CAPABILITY_DESCRIPTOR_EXTRACTOR,
    CAPABILITY_FACE_DETECTOR,
    CAPABILITY_LANDMARK_PREDICTOR,
)

logger = logging.getLogger(__name__)

# Dlib's 128-d ResNet descriptor with the SSD detector is what the distance thresholds are tuned for
DEFAULT_RECOGNITION_MODEL = "Dlib"
DEFAULT_DETECTOR_BACKEND = "ssd"


def _get_deepface(models_dir: str):
    # DeepFace resolves its weights directory from DEEPFACE_HOME at import time
    if models_dir:
        Path(models_dir).mkdir(parents=True, exist_ok=True)
        os.environ.setdefault("DEEPFACE_HOME", str(Path(models_dir).resolve()))
    from deepface import DeepFace
    return DeepFace


class DeepFaceProvider:
    """
    Provider for DeepFace detection + recognition models.

    DeepFace detectors return the eye landmarks used for alignment, so the
    landmark capability loads the detector model.
    """

    def __init__(
        self,
        recognition_model: str = DEFAULT_RECOGNITION_MODEL,
        detector_backend: str = DEFAULT_DETECTOR_BACKEND,
        models_dir: str = "",
    ):
        self.recognition_model = recognition_model
        self.detector_backend = detector_backend
        self.models_dir = models_dir

    def model_ids(self) -> Dict[str, str]:
        return {
            CAPABILITY_FACE_DETECTOR: self.detector_backend,
            CAPABILITY_LANDMARK_PREDICTOR: self.detector_backend,
            CAPABILITY_DESCRIPTOR_EXTRACTOR: self.recognition_model,
        }

    def load(self, capability: str, model_id: str) -> Any:
        """Build (and download on first use) the DeepFace model for a capability."""
        DeepFace = _get_deepface(self.models_dir)
        task = "facial_recognition" if capability == CAPABILITY_DESCRIPTOR_EXTRACTOR else "face_detector"
        logger.info(f"Building DeepFace {task} model '{model_id}' for {capability}")
        return DeepFace.build_model(model_name=model_id, task=task)

    def describe_faces(self, image: np.ndarray) -> List[np.ndarray]:
        """
        Detect + align + embed all faces of a BGR image.

        With enforce_detection=False DeepFace falls back to embedding the whole
        image with face_confidence 0 when it finds no face; those entries are
        dropped so an image without faces yields no descriptors.
        """
        DeepFace = _get_deepface(self.models_dir)
        objs = DeepFace.represent(
            img_path=image,
            model_name=self.recognition_model,
            detector_backend=self.detector_backend,
            enforce_detection=False,
            align=True,
        )
        descriptors: List[np.ndarray] = []
        for obj in objs or []:
            emb = obj.get("embedding")
            if emb is None:
                continue
            if float(obj.get("face_confidence") or 0.0) <= 0.0:
                continue
            descriptors.append(np.asarray(emb, dtype=np.float32))
        return descriptors
