# tests/conftest.py

import json
from pathlib import Path
from typing import Optional

import pytest
import yaml

from pathsource.core.system_cache import SystemCache


class MockConsole:
    """
    A mock console that captures all output for testing purposes.
    Simulates the rich.Console interface.
    """
    def __init__(self):
        self.logs = []
        self.prints = []

    def log(self, *objects, **kwargs):
        self.logs.append(" ".join(map(str, objects)))

    def print(self, *objects, **kwargs):
        self.prints.append(" ".join(map(str, objects)))


@pytest.fixture(autouse=True)
def _no_packages_dir_override(monkeypatch):
    monkeypatch.delenv("PATHSOURCE_PACKAGES_DIR", raising=False)


@pytest.fixture
def console() -> MockConsole:
    return MockConsole()


@pytest.fixture
def system_cache() -> SystemCache:
    cache = SystemCache()
    yield cache
    cache.reset()


@pytest.fixture
def make_package():
    """Create a package directory with a pkg.yaml (or pkg.json) manifest."""
    def _make(directory: Path, name: str, version: str = "1.0.0",
              dependencies: Optional[dict] = None, fmt: str = "yaml") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        data = {"name": name, "version": version}
        if dependencies:
            data["dependencies"] = dependencies
        if fmt == "json":
            (directory / "pkg.json").write_text(json.dumps(data), encoding="utf-8")
        else:
            (directory / "pkg.yaml").write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return directory
    return _make
