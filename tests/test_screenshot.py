import asyncio
import logging
import os
import re

import pytest

from clipshot.capture.runner import CommandResult
from clipshot.capture.screenshot import capture_screenshot
from conftest import FakeRunner


def test_capture_runs_interactive_selection(temp_files, temp_root):
    def handler(command, env):
        with open(command[-1], "wb") as fh:
            fh.write(b"png")
        return CommandResult(0, "", "")

    runner = FakeRunner(handler)
    path = asyncio.run(capture_screenshot(runner, temp_files, "screencapture"))

    assert runner.calls == [(["screencapture", "-i", path], None)]
    assert re.fullmatch(
        re.escape(str(temp_root)) + r"/raycast-ocr-screenshot-[0-9A-Z]{26}\.png", path)
    assert os.path.exists(path)


def test_cancelled_capture_still_returns_path(temp_files, temp_root, caplog):
    runner = FakeRunner(lambda command, env: CommandResult(1, "", "cancelled"))

    with caplog.at_level(logging.WARNING):
        path = asyncio.run(capture_screenshot(runner, temp_files, "screencapture"))

    assert path.startswith(f"{temp_root}/raycast-ocr-screenshot-")
    assert path.endswith(".png")
    assert not os.path.exists(path)
    assert "screencapture exited with 1" in caplog.text


def test_launch_failure_propagates(temp_files):
    def handler(command, env):
        raise FileNotFoundError(2, "No such file or directory", command[0])

    with pytest.raises(FileNotFoundError):
        asyncio.run(capture_screenshot(FakeRunner(handler), temp_files, "screencapture"))
