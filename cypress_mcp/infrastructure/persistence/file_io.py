from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

import aiofiles
from loguru import logger


async def atomic_write(path: Path, content: str) -> None:
    """Write content so that path holds either the old file or the whole new
    one.

    The temp file lives in the target directory so the final rename stays
    on one filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path_str = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    temp_path = Path(temp_path_str)

    try:
        async with aiofiles.open(fd, mode="w", encoding="utf-8", closefd=True) as f:
            await f.write(content)
            await f.flush()
        # mkstemp creates files with mode 0600
        await asyncio.to_thread(os.chmod, temp_path, 0o644)
        await asyncio.to_thread(os.replace, temp_path, path)
        logger.debug("Atomic write completed: {}", path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise


async def read_text(path: Path) -> str:
    async with aiofiles.open(path, encoding="utf-8") as f:
        return await f.read()
