"""Toolchain configuration assembled from environment values."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    DEFAULT_NETWORK,
    GAS_REPORTER_ENABLED,
    NETWORK_CONFIG,
    OPTIMIZER_ENABLED,
    OPTIMIZER_RUNS,
    POLYGONSCAN_API_KEY_ENV,
    PRIVATE_KEY_ENV,
    SOLIDITY_VERSION,
    SOURCIFY_ENABLED,
)
from .exceptions import MissingEnvironmentError, NetworkNotFoundError
from .paths import get_env_file
from .types import CompilerSettings, NetworkEndpoint, ToolchainConfig

logger = logging.getLogger(__name__)


def read_environment(env_file: Optional[Union[Path, str]] = None) -> Dict[str, Optional[str]]:
    """
    Merge the .env file with the process environment.

    Process environment values take precedence over the file. The process
    environment itself is not modified.

    Args:
        env_file: Path to .env file (defaults to ./.env); a missing file is ignored

    Returns:
        Dictionary of environment names to values
    """
    if env_file is None:
        env_file = get_env_file()

    env: Dict[str, Optional[str]] = {}
    env_path = Path(env_file)
    if env_path.exists():
        logger.debug("Loading environment file %s", env_path)
        env.update(dotenv_values(env_path))

    env.update(os.environ)
    return env


def format_private_key(raw_key: Optional[str]) -> Optional[str]:
    """
    Convert a raw private key to the 0x-prefixed signing credential.

    Args:
        raw_key: Hex private key with or without 0x prefix

    Returns:
        0x-prefixed key, or None if the key is missing or empty
    """
    if not raw_key:
        return None
    if raw_key.startswith(("0x", "0X")):
        return raw_key
    return f"0x{raw_key}"


def _lookup(env: Mapping[str, Optional[str]], name: str) -> Optional[str]:
    # Empty strings count as unset
    value = env.get(name)
    if not value:
        logger.warning("Environment variable %s is not set", name)
        return None
    return value


def load_config(
    env: Optional[Mapping[str, Optional[str]]] = None,
    env_file: Optional[Union[Path, str]] = None,
    strict: bool = False,
) -> ToolchainConfig:
    """
    Assemble the toolchain configuration.

    Missing values propagate as None unless ``strict`` is set.

    Args:
        env: Environment mapping to read; if None, reads the process
             environment layered over the .env file
        env_file: Path to .env file, only used when ``env`` is None
        strict: Validate every network before returning

    Returns:
        ToolchainConfig

    Raises:
        MissingEnvironmentError: If ``strict`` and a required value is absent
    """
    if env is None:
        env = read_environment(env_file)

    private_key = format_private_key(_lookup(env, PRIVATE_KEY_ENV))

    networks: Dict[str, NetworkEndpoint] = {}
    for network, network_config in NETWORK_CONFIG.items():
        networks[network] = NetworkEndpoint(
            name=network,
            url=_lookup(env, network_config["rpc_env"]),
            chain_id=network_config["chain_id"],
            signing_credential=private_key,
            chain_name=network_config["chain_name"],
            block_explorer_url=network_config["block_explorer_url"],
        )

    config = ToolchainConfig(
        default_network=DEFAULT_NETWORK,
        solidity=CompilerSettings(
            version=SOLIDITY_VERSION,
            optimizer_enabled=OPTIMIZER_ENABLED,
            optimizer_runs=OPTIMIZER_RUNS,
        ),
        networks=networks,
        etherscan_api_key=_lookup(env, POLYGONSCAN_API_KEY_ENV),
        sourcify_enabled=SOURCIFY_ENABLED,
        gas_reporter_enabled=GAS_REPORTER_ENABLED,
    )

    if strict:
        validate_config(config)

    return config


def missing_environment(config: ToolchainConfig, network: str) -> List[str]:
    """
    List environment variables a network still needs before deploying.

    Args:
        config: Toolchain configuration
        network: Network name ("polygon" or "amoy")

    Returns:
        Names of absent environment variables (empty if the network is ready)

    Raises:
        NetworkNotFoundError: If network is not configured
    """
    if network not in config.networks:
        raise NetworkNotFoundError(f"Network '{network}' not found in configuration")

    endpoint = config.networks[network]
    missing = []
    if not endpoint.url:
        missing.append(NETWORK_CONFIG[network]["rpc_env"])
    if not endpoint.signing_credential:
        missing.append(PRIVATE_KEY_ENV)
    return missing


def validate_config(config: ToolchainConfig, networks: Optional[Iterable[str]] = None) -> None:
    """
    Ensure the selected networks have an RPC URL and a signing credential.

    Args:
        config: Toolchain configuration
        networks: Network names to check (defaults to all configured networks)

    Raises:
        NetworkNotFoundError: If a network is not configured
        MissingEnvironmentError: If any required value is absent
    """
    if networks is None:
        networks = list(config.networks.keys())

    missing: List[str] = []
    for network in networks:
        for name in missing_environment(config, network):
            if name not in missing:
                missing.append(name)

    if missing:
        raise MissingEnvironmentError(
            f"Missing required environment variables: {', '.join(missing)}",
            names=missing,
        )


def config_as_dict(config: ToolchainConfig) -> Dict[str, Any]:
    """
    Render the configuration in the shape the deployment runtime reads.

    Args:
        config: Toolchain configuration

    Returns:
        Dictionary with defaultNetwork, solidity, networks, sourcify,
        gasReporter and etherscan sections
    """
    return {
        "defaultNetwork": config.default_network,
        "solidity": {
            "version": config.solidity.version,
            "settings": {
                "optimizer": {
                    "enabled": config.solidity.optimizer_enabled,
                    "runs": config.solidity.optimizer_runs,
                },
            },
        },
        "networks": {
            name: {
                "url": endpoint.url,
                "accounts": endpoint.accounts,
                "chainId": endpoint.chain_id,
            }
            for name, endpoint in config.networks.items()
        },
        "sourcify": {"enabled": config.sourcify_enabled},
        "gasReporter": {"enabled": config.gas_reporter_enabled},
        "etherscan": {"apiKey": config.etherscan_api_key},
    }
