import asyncio
import os
import traceback
from typing import Optional

from promptdocs.core.logging.channels import TraceChannels, get_channels
from ..domain.interfaces import IContentLoader, IFileWalker
from ..domain.models import Section
from ..data.content_loader import FileContentLoader
from ..data.file_walker import AsyncFileWalker


class SectionBuilder:
    """
    Turns a directory tree into one titled Section.

    The result always has one of three shapes: the populated section, the
    "no files found" notice, or the "error building section" report. The
    walker and loader already isolate their own failures; the outer
    try/except catches whatever slips past them.
    """

    def __init__(
        self,
        walker: Optional[IFileWalker] = None,
        loader: Optional[IContentLoader] = None,
        trace: Optional[TraceChannels] = None,
    ):
        self.trace = trace or get_channels()
        self.walker = walker or AsyncFileWalker(trace=self.trace)
        self.loader = loader or FileContentLoader(trace=self.trace)

    async def build(self, dir_path: str, section_title: str) -> Section:
        absolute_path = os.path.abspath(dir_path)

        self.trace.info(f"Building section: {section_title}")
        self.trace.info(f"Looking in directory: {dir_path}")
        self.trace.info(f"Absolute path: {absolute_path}")

        try:
            files = await self.walker.walk(dir_path)

            if not files:
                self.trace.error(f"No files found in {dir_path}")
                return Section.no_files(section_title, absolute_path, os.getcwd())

            contents = await self._load_all(files)

            self.trace.info(f"Successfully processed {len(files)} files for {section_title}")
            return Section.populated(section_title, [c.render() for c in contents])

        except Exception as e:
            self.trace.error(f"Error building section {section_title}:", e, exc_info=e)
            stack = "".join(traceback.format_exception(type(e), e, e.__traceback__)).rstrip()
            return Section.build_error(section_title, e, stack, absolute_path)

    async def _load_all(self, files):
        """
        Loads every file concurrently. If one load raises, the rest are
        cancelled so nothing keeps running after the section is returned.
        """
        tasks = [asyncio.ensure_future(self.loader.load(path)) for path in files]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
