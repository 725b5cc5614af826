"""Runtime configuration for clipshot.

Values come from the environment (optionally through a ``.env`` file) and
are validated by a pydantic model.
"""

import logging
import os
import re

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_TEMP_DIR = "/tmp"
DEFAULT_TEMP_PREFIX = "raycast-ocr-"
DEFAULT_OSASCRIPT = "osascript"
DEFAULT_SCREENCAPTURE = "/usr/sbin/screencapture"
DEFAULT_OUTPUT_ENV = "OCR_OUTPUT_PATH"

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tiff", ".heic")

ENV_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Settings(BaseModel):
    temp_dir: str = DEFAULT_TEMP_DIR
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    osascript_path: str = DEFAULT_OSASCRIPT
    screencapture_path: str = DEFAULT_SCREENCAPTURE
    output_path_env: str = DEFAULT_OUTPUT_ENV
    log_level: str = "INFO"

    @field_validator("temp_dir")
    @classmethod
    def _absolute_dir(cls, value: str) -> str:
        if not os.path.isabs(value):
            raise ValueError("temp_dir must be an absolute path")
        return os.path.normpath(value)

    @field_validator("temp_prefix")
    @classmethod
    def _plain_prefix(cls, value: str) -> str:
        if not value or "/" in value or value in {".", ".."}:
            raise ValueError("temp_prefix must be a non-empty file name prefix")
        return value

    @field_validator("output_path_env")
    @classmethod
    def _env_name(cls, value: str) -> str:
        if not ENV_NAME_PATTERN.match(value):
            raise ValueError("output_path_env must be a valid environment variable name")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level '{value}'")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            temp_dir=os.getenv("CLIPSHOT_TEMP_DIR", DEFAULT_TEMP_DIR),
            temp_prefix=os.getenv("CLIPSHOT_TEMP_PREFIX", DEFAULT_TEMP_PREFIX),
            osascript_path=os.getenv("CLIPSHOT_OSASCRIPT", DEFAULT_OSASCRIPT),
            screencapture_path=os.getenv(
                "CLIPSHOT_SCREENCAPTURE", DEFAULT_SCREENCAPTURE),
            output_path_env=os.getenv("CLIPSHOT_OUTPUT_ENV", DEFAULT_OUTPUT_ENV),
            log_level=os.getenv("CLIPSHOT_LOG_LEVEL", "INFO"),
        )
