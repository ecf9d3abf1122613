"""Integration tests for CLI-Controller communication."""

import pytest
from fastapi.testclient import TestClient

from cli.commands import handle_ls, handle_mkdir, handle_stat, handle_touch
from cli.controller_client import ControllerClient
from cli.models import LsCommand, MkdirCommand, StatCommand, TouchCommand
from cli.parser import parse_command
from controller.main import app
from controller.repositories.metadata_repository import SqliteMetadataStore
from controller.routes.path_routes import get_namespace_service
from controller.services.namespace_service import NamespaceService


@pytest.fixture
def cli_client(temp_config, tmp_path):
    """ControllerClient talking to the real app over a SQLite store."""
    store = SqliteMetadataStore(str(tmp_path / 'metadata.db'))
    app.dependency_overrides[get_namespace_service] = lambda: NamespaceService(store=store, chunk_size=4000)
    client = ControllerClient(temp_config)
    client.session = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_build_tree_and_list(cli_client):
    """Test mkdir -p, touch and ls against the controller."""
    assert 'Created directory' in handle_mkdir(MkdirCommand(path='/data/logs', parents=True), client=cli_client)
    assert 'Created file' in handle_touch(TouchCommand(path='/data/logs/today.txt'), client=cli_client)
    assert 'Created file' in handle_touch(TouchCommand(path='/data/readme.txt'), client=cli_client)

    listing = handle_ls(LsCommand(path='/data'), client=cli_client)

    assert '2 entries in /data' in listing
    assert '/data/logs' in listing
    assert '/data/readme.txt' in listing
    assert 'today.txt' not in listing


def test_touch_without_parent(cli_client):
    result = handle_touch(TouchCommand(path='/nowhere/a.txt'), client=cli_client)
    assert result.startswith('Error:')
    assert 'Parent directory does not exist' in result


def test_mkdir_below_file(cli_client):
    handle_touch(TouchCommand(path='/report'), client=cli_client)

    result = handle_mkdir(MkdirCommand(path='/report/2024', parents=True), client=cli_client)

    assert 'is a file' in result


def test_stat_parsed_command(cli_client):
    handle_mkdir(parse_command('mkdir /docs'), client=cli_client)

    result = handle_stat(parse_command('stat /docs/'), client=cli_client)

    assert 'Path:     /docs' in result
    assert 'Type:     dir' in result
    assert handle_stat(StatCommand(path='/missing'), client=cli_client).startswith('Error:')
