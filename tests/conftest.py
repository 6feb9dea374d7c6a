"""Shared pytest fixtures for horoscope-deployments tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict

import pytest

from horoscope_deployments.config import load_config
from horoscope_deployments.types import ToolchainConfig

SAMPLE_PRIVATE_KEY = "ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_env() -> Dict[str, str]:
    """Environment mapping with every value the configuration reads."""
    return {
        "API_URL_KEY": "https://polygon-mainnet.example.com/v2/key",
        "API_TESTNET_URL_KEY": "https://polygon-amoy.example.com/v2/key",
        "POLYGONSCAN_API_KEY": "POLYGONSCANKEY123",
        "PRIVATE_KEY": SAMPLE_PRIVATE_KEY,
    }


@pytest.fixture
def sample_config(sample_env: Dict[str, str]) -> ToolchainConfig:
    """Fully populated toolchain configuration."""
    return load_config(sample_env)


@pytest.fixture
def empty_config() -> ToolchainConfig:
    """Toolchain configuration built from an empty environment."""
    return load_config({})


@pytest.fixture
def sample_parameters_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample parameters.json fixture."""
    with open(fixtures_dir / "parameters.json") as f:
        return json.load(f)


@pytest.fixture
def parameters_sample(fixtures_dir: Path) -> Path:
    """Return path to sample Ignition parameters file."""
    return fixtures_dir / "parameters.json"


@pytest.fixture
def deployed_addresses_sample(fixtures_dir: Path) -> Path:
    """Return path to sample deployed_addresses.json file."""
    return fixtures_dir / "deployed_addresses.json"


@pytest.fixture
def temp_project(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Create a project directory with parameters and polygon deployments."""
    ignition_dir = tmp_path / "ignition"
    chain_dir = ignition_dir / "deployments" / "chain-137"
    chain_dir.mkdir(parents=True, exist_ok=True)

    shutil.copy(fixtures_dir / "parameters.json", ignition_dir / "parameters.json")
    shutil.copy(
        fixtures_dir / "deployed_addresses.json", chain_dir / "deployed_addresses.json"
    )
    return tmp_path
