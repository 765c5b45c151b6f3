#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Process runner
Spawns one external process, drains its output streams and reports the exit code
"""

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .exceptions import CommandTimeoutError, ProcessSpawnError
from .types import CommandFailure, CommandResult

# Bytes read per stream iteration
READ_CHUNK_SIZE = 4096


class ProcessRunner:
    """
    Asynchronous process runner

    Runs the command without a shell, with stdin detached and stdout/stderr
    captured into two independent buffers. A non-zero exit code is a normal
    result; only a failed spawn (or an exceeded timeout) raises.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        """
        Initialize process runner

        Args:
            timeout_seconds: Kill the process after this many seconds, None or 0 waits forever
        """
        self.timeout_seconds = timeout_seconds or None
        self.logger = logging.getLogger('warden_mcp.process_runner')

    async def execute(self, command: str, args: Sequence[str],
                      cwd: Union[str, Path]) -> CommandResult:
        """
        Run command with args in cwd and wait for it to exit

        Args:
            command: Executable name or path
            args: Literal argument vector
            cwd: Working directory of the child process

        Returns:
            CommandResult with the full captured output

        Raises:
            ProcessSpawnError: The executable could not be launched
            CommandTimeoutError: The process exceeded timeout_seconds
        """
        argv = [command, *args]
        stdout_chunks: List[bytes] = []
        stderr_chunks: List[bytes] = []

        self.logger.debug(f"Spawning {command} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(cwd),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self.logger.error(f"Failed to spawn {command}: {e}")
            raise ProcessSpawnError(CommandFailure(
                message=f"Failed to spawn command: {e}",
                partial_stdout=_decode(stdout_chunks),
                partial_stderr=_decode(stderr_chunks),
            )) from e

        collect = asyncio.gather(
            _drain(process.stdout, stdout_chunks),
            _drain(process.stderr, stderr_chunks),
            process.wait(),
        )

        try:
            if self.timeout_seconds:
                await asyncio.wait_for(collect, timeout=self.timeout_seconds)
            else:
                await collect
        except asyncio.TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            self.logger.warning(f"{command} killed after {self.timeout_seconds}s timeout")
            raise CommandTimeoutError(CommandFailure(
                message=f"Command timed out after {self.timeout_seconds} seconds",
                partial_stdout=_decode(stdout_chunks),
                partial_stderr=_decode(stderr_chunks),
            ))

        result = CommandResult(
            stdout=_decode(stdout_chunks),
            stderr=_decode(stderr_chunks),
            exit_code=process.returncode,
        )
        self.logger.debug(f"{command} exited with code {result.exit_code}")
        return result


async def _drain(stream: asyncio.StreamReader, chunks: List[bytes]) -> None:
    """Append everything the stream emits until EOF"""
    while True:
        data = await stream.read(READ_CHUNK_SIZE)
        if not data:
            break
        chunks.append(data)


def _decode(chunks: List[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")
