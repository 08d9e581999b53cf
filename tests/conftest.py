from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PACKAGE_BUILDER_* settings from the developer shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("PACKAGE_BUILDER_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    import yaml

    cfg = {
        "logging": {"level": "INFO"},
        "console": {"width": 100, "tool_name": "pb"},
    }
    p = tmp_path / "package-builder.yaml"
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg, f, sort_keys=False)
    return p
