import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, unique
from typing import Union

SECTION_UNDERLINE = "=" * 19


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata captured for one file at read time.
    """
    path: str
    size: int
    last_modified: datetime

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")

    @property
    def last_modified_display(self) -> str:
        return self.last_modified.isoformat(timespec="seconds")


@dataclass(frozen=True)
class ContentBlock:
    """
    A successfully read file, annotated with its metadata.
    """
    relative_path: str
    record: FileRecord
    content: str

    def render(self) -> str:
        return (
            f"\nFile: {self.relative_path}"
            f"\nSize: {self.record.size} bytes"
            f"\nLast Modified: {self.record.last_modified_display}"
            f"\n---"
            f"\n{self.content}\n"
        )


@dataclass(frozen=True)
class ContentPlaceholder:
    """
    Stands in for a file that could not be read.
    Renders as one line of plain text, so it slots into a Section
    exactly where the real block would have been.
    """
    path: str
    error: BaseException

    @property
    def file_name(self) -> str:
        return os.path.basename(self.path)

    def render(self) -> str:
        return f"Error reading {self.file_name}: {self.error}"


FileContent = Union[ContentBlock, ContentPlaceholder]


@unique
class SectionKind(str, Enum):
    POPULATED = "populated"
    NO_FILES = "no_files"
    BUILD_ERROR = "build_error"


@dataclass(frozen=True)
class Section:
    """
    One titled block of aggregated text, ready for prompt assembly.
    """
    title: str
    kind: SectionKind
    text: str

    def __str__(self) -> str:
        return self.text

    @staticmethod
    def heading(title: str) -> str:
        return f"\n{title}:\n{SECTION_UNDERLINE}\n"

    @classmethod
    def populated(cls, title: str, blocks) -> "Section":
        body = "\n\n".join(blocks)
        return cls(title, SectionKind.POPULATED, f"{cls.heading(title)}{body}\n")

    @classmethod
    def no_files(cls, title: str, attempted_path: str, working_dir: str) -> "Section":
        text = (
            f"{cls.heading(title)}"
            "No files found in directory. Debug info:\n"
            f"- Attempted path: {attempted_path}\n"
            f"- Working directory: {working_dir}\n"
        )
        return cls(title, SectionKind.NO_FILES, text)

    @classmethod
    def build_error(cls, title: str, error: BaseException, stack: str, directory: str) -> "Section":
        text = (
            f"{cls.heading(title)}"
            "Error building section. Debug info:\n"
            f"- Error: {error}\n"
            f"- Stack: {stack}\n"
            f"- Directory: {directory}\n"
        )
        return cls(title, SectionKind.BUILD_ERROR, text)


@dataclass(frozen=True)
class SectionRequest:
    """
    A directory to aggregate and the title to put above it.
    """
    dir_path: str
    title: str
