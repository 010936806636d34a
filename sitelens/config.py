from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from sitelens.constants import DEFAULT_LOG_LEVEL, GEMINI_MODEL


@dataclass(frozen=True)
class Config:
    api_key: Optional[str]
    model: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY") or None
        model = os.getenv("GEMINI_MODEL", GEMINI_MODEL).strip()
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        return cls._validate(
            api_key=api_key,
            model=model,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        model: str,
        log_level: str,
    ) -> "Config":
        match model:
            case "":
                raise ValueError("GEMINI_MODEL must not be empty")
            case _:
                pass

        return Config(
            api_key=api_key,
            model=model,
            log_level=log_level,
        )
