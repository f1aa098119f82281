"""Shared fixtures: the teal reference palette and a truecolor terminal."""

import pytest

from scalelab.logic.palette.engine import generate_palette


@pytest.fixture()
def teal_palette():
    return generate_palette(180, 5, 100, 0, "#FFFFFF")


@pytest.fixture(autouse=True)
def truecolor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLORTERM", "truecolor")
