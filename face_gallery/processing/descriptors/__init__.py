"""
Descriptors
-----------

- DescriptorExtractor: decoded image (or image reference) -> face descriptors.
"""
from .extractor import DescriptorExtractor

__all__ = ["DescriptorExtractor"]
