"""Centralized settings for the scheduler, loaded from env vars / .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # ── Environment ──────────────────────────────────────────────
    ENV: Literal["dev", "staging", "prod"] = Field(default="dev")

    # ── Booking window ───────────────────────────────────────────
    COACH_HORIZON_DAYS: int = Field(default=21, ge=0)  # 3 weeks
    ADMIN_HORIZON_DAYS: int = Field(default=90, ge=0)

    # ── Sessions ─────────────────────────────────────────────────
    DEFAULT_CAPACITY: int = Field(default=20, ge=1, le=500)
    SEED_DEMO_DATA: bool = Field(default=False)

    # ── Store ────────────────────────────────────────────────────
    STORE_RETRY_AFTER_S: int = Field(default=5, ge=0)

    # ── Observability ────────────────────────────────────────────
    LOG_LEVEL: str = Field(default="INFO")

    model_config = {
        "env_file": str(_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
