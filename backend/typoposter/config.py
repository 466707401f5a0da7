"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    typoposter_env: str = "development"
    typoposter_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Paper: fixed width, height grows with text length
    paper_width_mm: float = 80.0
    min_height_mm: float = 150.0
    mm_per_char: float = 1.45
    px_per_inch: float = 96.0

    # Live preview regeneration delay
    debounce_ms: int = 50

    # Input limit for poster text
    max_text_length: int = 120

    # Assets (empty = bundled shapes / Pillow's default font)
    shape_catalog_path: str = ""
    font_path: str = ""
    bold_font_path: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
