"""Command handler functions for CLI operations."""

from typing import Optional

from common.logging_config import get_logger
from cli.models import (
    ExistsCommand,
    LsCommand,
    MkdirCommand,
    StatCommand,
    TouchCommand,
)
from cli.config import ClientConfig, DEFAULT_CONFIG_PATH
from cli.controller_client import ControllerClient

logger = get_logger(__name__)


_client: Optional[ControllerClient] = None


def get_client() -> ControllerClient:
    """
    Get or create global ControllerClient instance.

    Returns:
        ControllerClient instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new ControllerClient instance")
        config = ClientConfig.load(DEFAULT_CONFIG_PATH)
        _client = ControllerClient(config)
    return _client


def handle_touch(cmd: TouchCommand, client: Optional[ControllerClient] = None) -> str:
    """
    Handle 'touch' command.

    Args:
        cmd: TouchCommand with path
        client: Optional ControllerClient for dependency injection (testing)

    Returns:
        Success or error message
    """
    logger.info(f"Executing touch command: path={cmd.path}")
    if client is None:
        client = get_client()
    return client.create_file(cmd.path)


def handle_mkdir(cmd: MkdirCommand, client: Optional[ControllerClient] = None) -> str:
    """
    Handle 'mkdir' command.

    Args:
        cmd: MkdirCommand with path and parents flag
        client: Optional ControllerClient for dependency injection (testing)

    Returns:
        Success or error message
    """
    logger.info(f"Executing mkdir command: path={cmd.path} parents={cmd.parents}")
    if client is None:
        client = get_client()
    return client.make_directory(cmd.path, parents=cmd.parents)


def handle_ls(cmd: LsCommand, client: Optional[ControllerClient] = None) -> str:
    """
    Handle 'ls' command.

    Args:
        cmd: LsCommand with directory path
        client: Optional ControllerClient for dependency injection (testing)

    Returns:
        Formatted list of children
    """
    if client is None:
        client = get_client()
    return client.list_children(cmd.path)


def handle_exists(cmd: ExistsCommand, client: Optional[ControllerClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.exists(cmd.path)


def handle_stat(cmd: StatCommand, client: Optional[ControllerClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.stat(cmd.path)
