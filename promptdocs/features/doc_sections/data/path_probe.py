import asyncio
import os


def _is_accessible(path: str) -> bool:
    try:
        return os.access(path, os.F_OK)
    except (OSError, ValueError):
        # ValueError: embedded null byte
        return False


async def path_exists(path: str) -> bool:
    """True if the path can currently be reached. Never raises."""
    return await asyncio.to_thread(_is_accessible, path)
