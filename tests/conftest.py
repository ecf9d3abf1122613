"""Shared pytest fixtures for all tests."""

import pytest
from cli.config import ClientConfig, ENV_OVERRIDES
from controller.repositories.metadata_repository import SqliteMetadataStore
from controller.store import InMemoryMetadataStore


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .gridfs directory
    """
    config_dir = tmp_path / '.gridfs'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir, monkeypatch):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture
        monkeypatch: Used to clear DFS_* overrides from the environment

    Returns:
        ClientConfig pointing at a temp config file
    """
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    return ClientConfig.load(temp_config_dir / 'config.json')


@pytest.fixture
def memory_store():
    """Empty in-memory metadata store."""
    return InMemoryMetadataStore()


@pytest.fixture
def sqlite_store(tmp_path):
    """Empty SQLite metadata store in a temporary directory."""
    return SqliteMetadataStore(str(tmp_path / 'metadata.db'))


@pytest.fixture(params=['memory', 'sqlite'])
def store(request, tmp_path):
    """Each namespace test runs against both store backends."""
    if request.param == 'memory':
        return InMemoryMetadataStore()
    return SqliteMetadataStore(str(tmp_path / 'metadata.db'))

