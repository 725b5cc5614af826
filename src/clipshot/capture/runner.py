"""External command execution.

Everything that leaves the Python process goes through a ``CommandRunner``
so callers can swap in a fake. Commands are always argument lists; nothing
is handed to a shell.
"""

import asyncio
import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(ABC):

    @abstractmethod
    async def run(
        self,
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        check: bool = True,
    ) -> CommandResult:
        """Run ``command`` to completion.

        Args:
            command: Executable followed by its arguments.
            env: Complete environment for the child, or None to inherit.
            check: Raise ``subprocess.CalledProcessError`` on a non-zero exit.
        """


class AsyncCommandRunner(CommandRunner):

    async def run(
        self,
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        check: bool = True,
    ) -> CommandResult:
        logger.debug(f"Running {command[0]} with {len(command) - 1} argument(s)")
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=dict(env) if env is not None else None,
        )
        stdout, stderr = await process.communicate()

        result = CommandResult(
            returncode=process.returncode,
            stdout=stdout.decode("utf-8", errors="ignore"),
            stderr=stderr.decode("utf-8", errors="ignore"),
        )
        if check and result.returncode != 0:
            raise subprocess.CalledProcessError(
                result.returncode,
                list(command),
                output=result.stdout,
                stderr=result.stderr,
            )
        return result
