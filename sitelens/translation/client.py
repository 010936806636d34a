"""TranslationClient — abstract base for bilingual translation backends."""
from abc import ABC, abstractmethod


class TranslationClient(ABC):
    @abstractmethod
    async def translate(self, text: str) -> str:
        """Return the bilingual rendering of text ("" if none). Raises on failure."""
        ...
