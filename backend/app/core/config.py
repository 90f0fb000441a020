"""
설정 로더

목표
- Python 3.9+에서도 문제 없이 돌아가게(= `str | None` 같은 3.10+ 문법 금지)
- .env가 좀 지저분해도, 깨지지 않게(extra ignore)
- 키가 하나도 없어도 서버는 뜬다 (로컬 fallback 아이디어 사용)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env 사용 + 알 수 없는 키 무시
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- API Keys (우선순위: Anthropic -> OpenAI) ---
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None)
    OPENAI_API_KEY: Optional[str] = Field(default=None)

    # --- Provider A: Anthropic Messages ---
    ANTHROPIC_API_URL: str = "https://api.anthropic.com/v1/messages"
    ANTHROPIC_VERSION: str = "2023-06-01"
    ANTHROPIC_MODEL: str = "claude-3-5-sonnet-20241022"
    ANTHROPIC_MAX_TOKENS: int = 4096

    # --- Provider B: OpenAI Chat Completions ---
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "gpt-4-turbo-preview"

    # None이면 requests 기본값(타임아웃 없음)
    PROVIDER_TIMEOUT_SEC: Optional[float] = None

    # --- Server ---
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    @field_validator("ANTHROPIC_API_KEY", "OPENAI_API_KEY", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v):
        # .env에 `OPENAI_API_KEY=` 처럼 빈 값만 있는 경우
        if v is None:
            return None
        v = str(v).strip()
        return v or None


settings = Settings()
