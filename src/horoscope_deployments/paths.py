"""Path management utilities for horoscope-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_project_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Path to the current working directory
    """
    return Path.cwd()


def _resolve_root(project_root: Optional[Union[Path, str]]) -> Path:
    if project_root is None:
        return get_default_project_root()
    return Path(project_root).absolute()


def get_env_file(project_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get path of the .env file holding RPC URLs and keys.

    Args:
        project_root: Custom project directory (defaults to current directory)

    Returns:
        Path to <project_root>/.env
    """
    return _resolve_root(project_root) / ".env"


def get_ignition_paths(
    project_root: Optional[Union[Path, str]] = None,
) -> tuple[Path, Path]:
    """
    Get Ignition file paths.

    Args:
        project_root: Custom project directory (defaults to current directory)

    Returns:
        Tuple of (parameters_path, deployments_dir)
    """
    ignition_dir = _resolve_root(project_root) / "ignition"

    parameters_path = ignition_dir / "parameters.json"
    deployments_dir = ignition_dir / "deployments"

    return (parameters_path, deployments_dir)


def get_deployed_addresses_path(
    chain_id: int, project_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the deployed_addresses.json path for a chain.

    Args:
        chain_id: Chain identifier, e.g. 137
        project_root: Custom project directory (defaults to current directory)

    Returns:
        Path to ignition/deployments/chain-<chain_id>/deployed_addresses.json
    """
    deployments_dir = get_ignition_paths(project_root)[1]
    return deployments_dir / f"chain-{chain_id}" / "deployed_addresses.json"
