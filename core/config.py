from __future__ import annotations
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # 프로젝트 루트
DEFAULT_TPL_DIR = BASE_DIR / "templates"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    gemini_api_key: str
    gemini_api_url: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
    )
    llm_model_label: str = "Google Gemini 2.5 Flash"
    gemini_timeout_seconds: float = 30.0
    gemini_max_response_bytes: int = 10 * 1024 * 1024  # 10MB

    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )
    log_level: str = "INFO"

    template_path: str = str(DEFAULT_TPL_DIR)

    @property
    def template_dir(self) -> str:
        p = Path(self.template_path)
        if not p.is_absolute():
            p = (BASE_DIR / p).resolve()
        return str(p)


settings = Settings()
