"""Pytest configuration and fixtures for goto tests."""

import sys
from pathlib import Path

import pytest


class FakeThemeLookup:
    """ThemeLookupPort that answers from a dict and records every call."""

    def __init__(self, options: dict | None = None):
        self.options = options or {}
        self.calls: list[tuple[str, str]] = []

    def lookup(self, project: str, option_name: str) -> str:
        self.calls.append((project, option_name))
        return self.options[option_name]


@pytest.fixture
def fake_lookup():
    return FakeThemeLookup({"template": "twentytwentyone", "stylesheet": "acme-child"})


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """A Projects directory holding one site, example.com."""
    root = tmp_path / "Projects"
    (root / "example.com" / "wp-content" / "themes").mkdir(parents=True)
    return root


@pytest.fixture
def invoked_from(projects_root: Path, monkeypatch):
    """Pretend goto was launched from a script inside the projects root."""
    monkeypatch.setattr(sys, "argv", [str(projects_root / "goto")])
    monkeypatch.delenv("GOTO_CONFIG", raising=False)
    return projects_root / "goto"
