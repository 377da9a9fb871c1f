"""Shared fixtures for the treeconf test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from treeconf.config import Config


SAMPLE_YAML = """
app:
  name: demo
  debug: "true"
  verbose: false
  workers: 4
  ratio: 0.75
  threshold: "2.5"
  retries: "3"
db:
  host: localhost
  ports: [80, 443]
  replicas:
    - host: r1
      weight: 1
    - host: r2
      weight: 2
matrix:
  - [1, 2]
  - [3, 4]
flags: [true, "false", "1"]
tags: [web, api]
mixed: [1, "two", 3]
empty_value:
"""


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """The parsed form of SAMPLE_YAML."""
    return Config.from_string(SAMPLE_YAML).to_dict()


@pytest.fixture
def config() -> Config:
    """A Config built from SAMPLE_YAML with the default delimiter."""
    return Config.from_string(SAMPLE_YAML)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing dedented YAML text to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    return _write
