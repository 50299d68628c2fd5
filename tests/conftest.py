"""Shared test fixtures for all test modules."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TREE_OUTLINE_* variables from the developer's shell out of tests."""
    for name in (
        "TREE_OUTLINE_TAG_FIELD",
        "TREE_OUTLINE_IGNORE",
        "TREE_OUTLINE_OUTLINE",
        "TREE_OUTLINE_COLOR",
        "TREE_OUTLINE_INLINE_SINGLE_ENTRY",
        "TREE_OUTLINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory (config and log locations)."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def binary_tree():
    """Small expression tree: 1 + 2."""
    return {
        "type": "Binary",
        "left": {"type": "Num", "value": 1},
        "op": "+",
        "right": {"type": "Num", "value": 2},
    }


@pytest.fixture
def program_tree():
    """Tree with a list mixing a tagged node and a scalar."""
    return {
        "type": "Program",
        "body": [{"type": "Num", "value": 1}, 2],
    }
