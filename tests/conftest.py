import pytest
from palette_checker.core.env import FLIP_VAR, FORMAT_VAR


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset palette-check variables; anything load_env() sets is undone after the test."""
    for name in (FORMAT_VAR, FLIP_VAR):
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
