# File: promptdocs/features/doc_sections/service/api.py
import asyncio
import os
from typing import Dict, List, Sequence

from promptdocs.core.config.settings import settings
from promptdocs.core.logging.channels import enable_debug, get_channels
from ..domain.models import SectionRequest
from ..data.content_loader import FileContentLoader
from ..data.file_walker import AsyncFileWalker
from .builder import SectionBuilder


async def read_files_recursively(dir_path: str) -> List[str]:
    """Absolute paths of every regular file under dir_path ([] on any failure)."""
    return await AsyncFileWalker().walk(dir_path)


async def get_file_content(file_path: str) -> str:
    """Annotated text block for one file, or a one-line error placeholder."""
    return await FileContentLoader().load_text(file_path)


async def build_doc_section(dir_path: str, section_title: str) -> str:
    """
    Public API: Aggregates every file under dir_path into one titled section.
    Always returns text, even when the directory is missing or unreadable.
    """
    section = await SectionBuilder().build(dir_path, section_title)
    return section.text


async def build_doc_sections(requests: Sequence[SectionRequest]) -> List[str]:
    """
    Builds several sections concurrently.
    Results come back in request order.
    """
    builder = SectionBuilder()
    sections = await asyncio.gather(*(builder.build(r.dir_path, r.title) for r in requests))
    return [s.text for s in sections]


async def build_default_sections(debug: bool = False) -> Dict[str, str]:
    """
    Builds the configured examples and documentation sections.

    Args:
        debug: Enables every prompt:* channel before building.
               PROMPT_DEBUG does the same from the environment.

    Returns:
        Section text keyed by title.
    """
    if debug:
        enable_debug("prompt:*")
    elif settings.DEBUG_ENABLED:
        enable_debug(settings.DEBUG_NAMESPACES)

    trace = get_channels()
    trace.info("Starting prompt build")
    trace.info(f"Working directory: {os.getcwd()}")

    requests = [
        SectionRequest(dir_path=settings.EXAMPLES_DIR, title=settings.EXAMPLES_TITLE),
        SectionRequest(dir_path=settings.DOCS_DIR, title=settings.DOCS_TITLE),
    ]
    texts = await build_doc_sections(requests)
    return {r.title: text for r, text in zip(requests, texts)}
