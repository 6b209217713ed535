"""Shared fixtures for building translation folders on disk."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def translation_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "i18n"
    folder.mkdir()
    return folder


@pytest.fixture
def write_translation(translation_folder: Path) -> Callable[[str, object], Path]:
    """Write a translation file; dicts are dumped as JSON, str/bytes written raw."""

    def _write(filename: str, content: object) -> Path:
        path = translation_folder / filename
        if isinstance(content, bytes):
            path.write_bytes(content)
        elif isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
