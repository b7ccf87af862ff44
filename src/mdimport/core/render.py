"""External diagram renderer invocation (Mermaid CLI)"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from mdimport.config import Settings


class RenderError(RuntimeError):
    """The external renderer failed to produce an image."""


def renderer_command(source_file: Path, output_file: Path, settings: Settings) -> list[str]:
    """Argument vector for one render: input, output and background colour."""
    return [
        settings.renderer,
        "-i", str(source_file),
        "-o", str(output_file),
        "-b", settings.background,
    ]


async def render_diagram(source_file: Path, output_file: Path, settings: Settings) -> Path:
    """Render source_file to output_file, returning output_file.

    Raises RenderError when the executable is missing, exits non-zero,
    times out, or does not produce the output file.
    """
    cmd = renderer_command(source_file, output_file, settings)
    executable = shutil.which(cmd[0]) or cmd[0]
    try:
        proc = await asyncio.create_subprocess_exec(
            executable,
            *cmd[1:],
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise RenderError(f"Cannot run renderer {cmd[0]}: {e}") from e

    try:
        _, stderr = await asyncio.wait_for(proc.communicate(), timeout=settings.render_timeout)
    except asyncio.TimeoutError as e:
        proc.kill()
        await proc.wait()
        raise RenderError(f"Timeout after {settings.render_timeout}s rendering {source_file.name}") from e

    if proc.returncode != 0:
        detail = (stderr or b"").decode("utf-8", errors="replace").strip()
        raise RenderError(f"{cmd[0]} exited with {proc.returncode}: {detail}")
    if not output_file.exists():
        raise RenderError(f"{cmd[0]} produced no output at {output_file}")
    return output_file
