from abc import ABC, abstractmethod
from typing import List
from .models import FileContent, FileRecord


class IFileWalker(ABC):
    """
    Contract for traversing a directory tree.
    """
    @abstractmethod
    async def walk(self, directory: str) -> List[str]:
        """
        Returns the absolute path of every regular file under `directory`.
        Must never raise: failures shrink the result instead.
        """
        pass


class IMetadataReader(ABC):
    @abstractmethod
    async def read(self, path: str) -> FileRecord:
        """Stats a file. Raises OSError if it is gone or unreadable."""
        pass


class IContentLoader(ABC):
    """
    Contract for turning one file into an annotated text block.
    """
    @abstractmethod
    async def load(self, path: str) -> FileContent:
        """
        Reads the file and its metadata.
        Returns a ContentPlaceholder instead of raising.
        """
        pass

    async def load_text(self, path: str) -> str:
        content = await self.load(path)
        return content.render()
