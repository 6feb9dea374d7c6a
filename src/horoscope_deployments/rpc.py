"""JSON-RPC network checks for horoscope-deployments library."""

import logging

import requests

from .config import missing_environment
from .exceptions import ChainIdMismatchError, MissingEnvironmentError
from .types import NetworkEndpoint, ToolchainConfig

logger = logging.getLogger(__name__)


def get_chain_id(rpc_url: str) -> int:
    """
    Fetch the chain ID reported by an RPC endpoint.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain ID as integer

    Raises:
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=30,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        return int(result["result"], 16)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def check_network(config: ToolchainConfig, network: str) -> NetworkEndpoint:
    """
    Verify a network is ready and its RPC reports the configured chain.

    Args:
        config: Toolchain configuration
        network: Network name ("polygon" or "amoy")

    Returns:
        The checked NetworkEndpoint

    Raises:
        NetworkNotFoundError: If network is not configured
        MissingEnvironmentError: If the RPC URL or signing credential is absent
        ChainIdMismatchError: If the RPC reports another chain ID
    """
    missing = missing_environment(config, network)
    if missing:
        raise MissingEnvironmentError(
            f"Network '{network}' is missing environment variables: {', '.join(missing)}",
            names=missing,
        )

    endpoint = config.networks[network]
    chain_id = get_chain_id(endpoint.url)
    if chain_id != endpoint.chain_id:
        raise ChainIdMismatchError(
            f"RPC for network '{network}' reports chain {chain_id}, "
            f"expected {endpoint.chain_id}"
        )

    logger.info("Network %s reachable on chain %d", network, chain_id)
    return endpoint
