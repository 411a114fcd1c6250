# File: tests/conftest.py

import os
import sys
import logging
import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from promptdocs.core.logging.channels import disable_debug


@pytest.fixture(autouse=True)
def reset_channels():
    """
    Every test starts and ends with all prompt:* channels silent.
    """
    disable_debug()
    yield
    disable_debug()


@pytest.fixture
def traces(caplog):
    """
    Captures every prompt:* trace emitted during the test.
    """
    caplog.set_level(logging.DEBUG, logger="prompt")
    return caplog


@pytest.fixture
def doc_tree(tmp_path):
    """
    Creates:
    docs/
      a.txt
      sub/
        b.txt
    """
    root = tmp_path / "docs"
    root.mkdir()
    (root / "a.txt").write_text("alpha content")

    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("beta content")

    return root
