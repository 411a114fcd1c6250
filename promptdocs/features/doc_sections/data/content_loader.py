import asyncio
import os
from typing import Optional

from promptdocs.core.logging.channels import TraceChannels, get_channels
from ..domain.interfaces import IContentLoader, IMetadataReader
from ..domain.models import ContentBlock, ContentPlaceholder, FileContent
from .metadata_reader import StatMetadataReader


def _read_text(path: str) -> str:
    # newline="" keeps \r\n and lone \r as they are on disk
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def display_path(path: str) -> str:
    """Path relative to the working directory, or the path itself if there is none."""
    try:
        return os.path.relpath(path, os.getcwd())
    except ValueError:
        # Windows: different drive
        return path


class FileContentLoader(IContentLoader):
    """
    Reads one file into an annotated block.
    I/O failures become a ContentPlaceholder; nothing is raised.
    """

    def __init__(self, metadata: Optional[IMetadataReader] = None, trace: Optional[TraceChannels] = None):
        self.metadata = metadata or StatMetadataReader()
        self.trace = trace or get_channels()

    async def load(self, path: str) -> FileContent:
        try:
            content = await asyncio.to_thread(_read_text, path)
            record = await self.metadata.read(path)
            relative_path = display_path(path)

            self.trace.info(f"Reading file: {relative_path}")
            self.trace.info(f"File size: {record.size} bytes")
            self.trace.info(f"Last modified: {record.last_modified_display}")

            return ContentBlock(relative_path=relative_path, record=record, content=content)
        except Exception as e:
            self.trace.error(f"Error reading file {path}:", e)
            return ContentPlaceholder(path=path, error=e)
