"""Shared pytest configuration for logvalues tests."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests crossing module boundaries")


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)


@pytest.fixture
def counting_parser(monkeypatch: pytest.MonkeyPatch):
    """Patch the formatter's parse function and count its invocations."""
    import logvalues.formatter as formatter_mod

    calls: list[str] = []
    original = formatter_mod.parse_template

    def _counting(text: str):
        calls.append(text)
        return original(text)

    monkeypatch.setattr(formatter_mod, "parse_template", _counting)
    return calls
