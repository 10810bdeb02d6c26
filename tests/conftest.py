import pytest

SETTINGS_ENV_VARS = (
    "CONTENTFUL_ACCESS_TOKEN",
    "CONTENTFUL_DELIVERY_TOKEN",
    "CONTENTFUL_PREVIEW_TOKEN",
    "CONTENTFUL_SPACE_ID",
    "CONTENTFUL_ENVIRONMENT",
    "NODE_ENV",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Hide pipeline env vars and any local .env file from Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
