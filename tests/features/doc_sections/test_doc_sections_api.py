import logging
import pytest

from promptdocs.core.config.settings import settings
from promptdocs.features.doc_sections.domain.models import SectionRequest
from promptdocs.features.doc_sections.service.api import (
    build_default_sections,
    build_doc_section,
    build_doc_sections,
    get_file_content,
    read_files_recursively,
)


@pytest.mark.asyncio
async def test_build_doc_section_returns_text(doc_tree):
    text = await build_doc_section(str(doc_tree), "Documentation")

    assert isinstance(text, str)
    assert text.startswith("\nDocumentation:\n===================\n")
    assert "alpha content" in text


@pytest.mark.asyncio
async def test_build_doc_section_for_missing_directory(tmp_path):
    text = await build_doc_section(str(tmp_path / "missing"), "Documentation")

    assert "No files found in directory." in text
    assert str(tmp_path / "missing") in text


@pytest.mark.asyncio
async def test_build_doc_sections_keeps_request_order(doc_tree, tmp_path):
    requests = [
        SectionRequest(dir_path=str(tmp_path / "missing"), title="First"),
        SectionRequest(dir_path=str(doc_tree), title="Second"),
    ]

    first, second = await build_doc_sections(requests)

    assert first.startswith("\nFirst:\n")
    assert "No files found" in first
    assert second.startswith("\nSecond:\n")
    assert "beta content" in second


@pytest.mark.asyncio
async def test_walker_and_loader_helpers(doc_tree):
    files = await read_files_recursively(str(doc_tree))
    assert len(files) == 2

    texts = [await get_file_content(f) for f in sorted(files)]
    assert texts[0].endswith("---\nalpha content\n")
    assert texts[1].endswith("---\nbeta content\n")


@pytest.mark.asyncio
async def test_build_default_sections(doc_tree, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "EXAMPLES_DIR", str(doc_tree))
    monkeypatch.setattr(settings, "DOCS_DIR", str(tmp_path / "no_docs"))
    monkeypatch.setattr(settings, "DEBUG_NAMESPACES", "")

    sections = await build_default_sections()

    assert list(sections) == [settings.EXAMPLES_TITLE, settings.DOCS_TITLE]
    assert "alpha content" in sections[settings.EXAMPLES_TITLE]
    assert "No files found" in sections[settings.DOCS_TITLE]


@pytest.mark.asyncio
async def test_build_default_sections_debug_enables_channels(doc_tree, monkeypatch):
    monkeypatch.setattr(settings, "EXAMPLES_DIR", str(doc_tree))
    monkeypatch.setattr(settings, "DOCS_DIR", str(doc_tree))

    await build_default_sections(debug=True)

    for name in ("prompt.info", "prompt.error", "prompt.db"):
        assert logging.getLogger(name).level == logging.DEBUG


@pytest.mark.asyncio
async def test_build_default_sections_reads_env_namespaces(doc_tree, monkeypatch):
    monkeypatch.setattr(settings, "EXAMPLES_DIR", str(doc_tree))
    monkeypatch.setattr(settings, "DOCS_DIR", str(doc_tree))
    monkeypatch.setattr(settings, "DEBUG_NAMESPACES", "prompt:error")

    await build_default_sections()

    assert logging.getLogger("prompt.error").level == logging.DEBUG
    assert logging.getLogger("prompt.info").level == logging.NOTSET
