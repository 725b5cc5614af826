import pytest
from pydantic import ValidationError

from clipshot.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.temp_dir == "/tmp"
    assert settings.temp_prefix == "raycast-ocr-"
    assert settings.screencapture_path == "/usr/sbin/screencapture"
    assert settings.output_path_env == "OCR_OUTPUT_PATH"


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CLIPSHOT_TEMP_DIR", str(tmp_path) + "/")
    monkeypatch.setenv("CLIPSHOT_TEMP_PREFIX", "ocr-")
    monkeypatch.setenv("CLIPSHOT_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.temp_dir == str(tmp_path)
    assert settings.temp_prefix == "ocr-"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("field,value", [
    ("temp_dir", "relative/tmp"),
    ("temp_prefix", ""),
    ("temp_prefix", "../escape-"),
    ("output_path_env", 'OUT" & do shell script "x'),
    ("log_level", "LOUD"),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_temp_dir_is_normalized(tmp_path):
    settings = Settings(temp_dir=f"{tmp_path}/a/../b")

    assert settings.temp_dir == str(tmp_path / "b")
