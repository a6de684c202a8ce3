"""Pytest configuration and shared sample documents."""

import os
from pathlib import Path
from typing import Optional

import pytest


SIMPLE_DOC = "@3a\ntitle T\ncol r fg:red\n\n@body\nAB\nCD\n\n"

COLORED_DOC = """@3a
;; the cat
title Cat
author alice
;; drawn again
orig-author bob
delay 100 1:200
loop no
col r fg:red bg:blue
#cat #animal
#pet

@body
/\\rr
^^1_

/\\_r
^^__

"""

LEGACY_DOC = (
    "title Old\n"
    "\tlegacy comment\n"
    "colors fg\n"
    "width 2\n"
    "height 1\n"
    "\n"
    "ab\n"
    "14\n"
    "cd\n"
    "9c\n"
)


@pytest.fixture
def simple_doc() -> str:
    return SIMPLE_DOC


@pytest.fixture
def colored_doc() -> str:
    return COLORED_DOC


@pytest.fixture
def legacy_doc() -> str:
    return LEGACY_DOC


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set ART3A_TEST_DIR to a directory holding ``*.3a`` files.
    """
    if env_path := os.environ.get("ART3A_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def sample_3a_files() -> list[Path]:
    """Fixture providing external 3a files, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set ART3A_TEST_DIR")
    files = sorted(art_dir.glob("*.3a"))
    if not files:
        pytest.skip(f"No .3a files found in {art_dir}")
    # Limit to avoid very slow tests
    return files[:50]
