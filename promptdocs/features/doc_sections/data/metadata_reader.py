import asyncio
import os
from datetime import datetime

from ..domain.interfaces import IMetadataReader
from ..domain.models import FileRecord


class StatMetadataReader(IMetadataReader):
    async def read(self, path: str) -> FileRecord:
        # OSError is left to the caller; the file may have vanished since discovery.
        stats = await asyncio.to_thread(os.stat, path)
        return FileRecord(
            path=path,
            size=stats.st_size,
            last_modified=datetime.fromtimestamp(stats.st_mtime).astimezone(),
        )
