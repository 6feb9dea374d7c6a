"""
horoscope-deployments: Python library for Horoscope and whitelist contract deployments
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .config import config_as_dict, load_config, validate_config
from .deployments import DeploymentPlanner
from .exceptions import (
    ChainIdMismatchError,
    ConfigurationError,
    ContractNotDeployedError,
    DeploymentError,
    DeploymentModuleNotFoundError,
    InvalidParameterError,
    MissingEnvironmentError,
    NetworkNotFoundError,
    ParameterNotFoundError,
    ParametersFileNotFoundError,
)
from .modules import get_module, instantiate, module_names, resolve_parameters
from .types import (
    CompilerSettings,
    ContractInstantiation,
    DeploymentModule,
    DeploymentParameter,
    DeploymentPlan,
    NetworkEndpoint,
    ToolchainConfig,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("horoscope-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentPlanner",
    "load_config",
    "validate_config",
    "config_as_dict",
    "get_module",
    "module_names",
    "resolve_parameters",
    "instantiate",
    "CompilerSettings",
    "ContractInstantiation",
    "DeploymentModule",
    "DeploymentParameter",
    "DeploymentPlan",
    "NetworkEndpoint",
    "ToolchainConfig",
    "DeploymentError",
    "ConfigurationError",
    "MissingEnvironmentError",
    "NetworkNotFoundError",
    "DeploymentModuleNotFoundError",
    "ParameterNotFoundError",
    "InvalidParameterError",
    "ParametersFileNotFoundError",
    "ContractNotDeployedError",
    "ChainIdMismatchError",
]
