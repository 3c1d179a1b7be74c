"""
Shared pytest fixtures and helpers.

Pytest picks this file up automatically, so the fixtures below are available
to every test module in this folder.
"""

import sys
from pathlib import Path

import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
# Allow tests to import shapes_demo without installing the package first.
sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config):
    for marker, text in (
        ("model", "shape variant measurements"),
        ("loader", "shape file parsing"),
        ("report", "sorting and summary statistics"),
        ("integration", "end-to-end runs of the entry point"),
    ):
        config.addinivalue_line("markers", f"{marker}: {text}")


@pytest.fixture(autouse=True)
def _lenient_by_default(monkeypatch):
    # Ignore any SHAPES_STRICT in the developer's shell; tests opt in explicitly.
    from shapes_demo import loader

    monkeypatch.setattr(loader, "SHAPES_STRICT", False)


@pytest.fixture()
def shapes_file(tmp_path):
    # Factory that writes the given lines to a temporary shapes file.
    def _write(*lines, name="shapes.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
