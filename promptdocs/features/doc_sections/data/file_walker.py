import asyncio
import os
from typing import List, Optional

from promptdocs.core.logging.channels import TraceChannels, get_channels
from ..domain.interfaces import IFileWalker
from .path_probe import path_exists


def _list_entries(directory: str) -> List[os.DirEntry]:
    with os.scandir(directory) as it:
        return list(it)


class AsyncFileWalker(IFileWalker):
    """
    Recursive walker that fans out over every entry of a directory at once.
    Any failure is folded into the result as an empty list, so a bad entry
    or an unlistable subtree only removes itself from the output.
    """

    def __init__(self, trace: Optional[TraceChannels] = None):
        self.trace = trace or get_channels()

    async def walk(self, directory: str) -> List[str]:
        try:
            if not await path_exists(directory):
                self.trace.error(f"Directory not found: {directory}")
                self.trace.error(f"Current working directory: {os.getcwd()}")
                self.trace.error(f"Attempted absolute path: {os.path.abspath(directory)}")
                return []

            entries = await asyncio.to_thread(_list_entries, directory)
            branches = await asyncio.gather(
                *(self._visit(entry) for entry in entries)
            )
            return [path for branch in branches for path in branch]
        except Exception as e:
            self.trace.error(f"Error reading directory {directory}:", e)
            return []

    async def _visit(self, entry: os.DirEntry) -> List[str]:
        try:
            resolved = os.path.abspath(entry.path)

            # Directory symlinks are not followed, file symlinks are.
            if await asyncio.to_thread(entry.is_dir, follow_symlinks=False):
                return await self.walk(resolved)

            if await asyncio.to_thread(entry.is_file):
                self.trace.info(f"Found file: {resolved}")
                return [resolved]

            self.trace.info(f"Skipping non-regular entry: {resolved}")
            return []
        except Exception as e:
            self.trace.error(f"Error processing {entry.path}:", e)
            return []
