from pathlib import Path
import sys
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

import pytest

# ensure src is importable
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from clipshot.capture.runner import CommandResult, CommandRunner  # type: ignore
from clipshot.clipboard.base import ClipboardContent, ClipboardReader  # type: ignore
from clipshot.config import Settings  # type: ignore
from clipshot.utils.temp_files import TempFileManager  # type: ignore

Handler = Callable[[Sequence[str], Optional[Mapping[str, str]]], CommandResult]


class FakeRunner(CommandRunner):
    """Records every command and answers through ``handler``."""

    def __init__(self, handler: Optional[Handler] = None):
        self.handler = handler or (lambda command, env: CommandResult(0, "", ""))
        self.calls: List[Tuple[List[str], Optional[dict]]] = []

    async def run(self, command, env=None, check=True):
        self.calls.append((list(command), dict(env) if env is not None else None))
        return self.handler(command, env)


class FakeReader(ClipboardReader):

    def __init__(self, content: Optional[ClipboardContent] = None):
        self.content = content or ClipboardContent()

    def read(self) -> ClipboardContent:
        return self.content


def osascript_writes(data: bytes = b"\x89PNG\r\n\x1a\n", status: str = "success",
                     env_var: str = "OCR_OUTPUT_PATH") -> Handler:
    """Behave like osascript with an image on the clipboard."""
    def handler(command, env):
        Path(env[env_var]).write_bytes(data)
        return CommandResult(0, f"{status}\n", "")
    return handler


@pytest.fixture
def temp_root(tmp_path) -> Path:
    root = tmp_path / "tmp"
    root.mkdir()
    return root


@pytest.fixture
def settings(temp_root) -> Settings:
    return Settings(
        temp_dir=str(temp_root),
        osascript_path="osascript",
        screencapture_path="screencapture",
    )


@pytest.fixture
def temp_files(settings) -> TempFileManager:
    return TempFileManager(settings)
