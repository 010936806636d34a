"""VisionClient — abstract base for photo analysis backends."""
from abc import ABC, abstractmethod

from sitelens.image_data import EncodedImage


class VisionClient(ABC):
    @abstractmethod
    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        """Analyze an image and return the model's text ("" if none). Raises on failure."""
        ...
