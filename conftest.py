"""Shared fixtures: every test gets an empty home directory."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def runner(home):
    return CliRunner()
