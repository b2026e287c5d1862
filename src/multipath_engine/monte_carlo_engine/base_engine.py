"""
Base path generator
"""

from abc import ABC, abstractmethod
import logging

from .random_sequences import Sample

logger = logging.getLogger(__name__)

class BasePathGenerator(ABC):
    """Base class for all path generators"""

    @abstractmethod
    def next(self) -> Sample:
        """Draw the next random path"""
        pass

    @abstractmethod
    def antithetic(self) -> Sample:
        """Mirror of the most recently drawn path"""
        pass

    def __iter__(self):
        return self

    def __next__(self) -> Sample:
        return self.next()
