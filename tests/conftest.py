import pytest

from typekit import config


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Every test starts from the built-in settings."""
    monkeypatch.delenv(config.SETTINGS_ENV_VAR, raising=False)
    config.configure(None)
    yield
    config.configure(None)
