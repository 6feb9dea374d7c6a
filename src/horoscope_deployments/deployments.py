"""Main API for horoscope-deployments library."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import load_config, validate_config
from .exceptions import (
    ContractNotDeployedError,
    NetworkNotFoundError,
    ParametersFileNotFoundError,
)
from .modules import get_module, instantiate, module_names, resolve_parameters
from .parsers import module_overrides, parse_deployed_addresses, parse_parameters_file
from .paths import get_deployed_addresses_path, get_ignition_paths
from .rpc import check_network
from .types import ContractInstantiation, DeploymentModule, DeploymentPlan, ToolchainConfig

logger = logging.getLogger(__name__)


class DeploymentPlanner:
    """Builds deployment plans for the declared modules across networks."""

    def __init__(
        self,
        config: Optional[ToolchainConfig] = None,
        parameters_path: Optional[Union[Path, str]] = None,
        project_root: Optional[Union[Path, str]] = None,
    ):
        """
        Initialize the deployment planner.

        Args:
            config: Toolchain configuration
                    If None, loaded leniently from the environment and .env
            parameters_path: Path to Ignition parameters JSON
                             If None, uses ignition/parameters.json when present
            project_root: Project directory (defaults to current directory)

        Raises:
            ParametersFileNotFoundError: If an explicit parameters file is missing
        """
        self._project_root = project_root

        if config is None:
            env_file = None
            if project_root is not None:
                env_file = Path(project_root) / ".env"
            config = load_config(env_file=env_file)
        self._config = config

        if parameters_path is None:
            default_path = get_ignition_paths(project_root)[0]
            self._parameters = (
                parse_parameters_file(default_path) if default_path.exists() else {}
            )
        else:
            path = Path(parameters_path)
            if not path.exists():
                raise ParametersFileNotFoundError(f"Parameters file not found at {path}")
            self._parameters = parse_parameters_file(path)

    @property
    def config(self) -> ToolchainConfig:
        return self._config

    def module_names(self) -> List[str]:
        """
        Get list of declared deployment module names.

        Returns:
            List of module names (e.g., ["HoroscopeNFTv3Module", ...])
        """
        return module_names()

    def has_module(self, module_name: str) -> bool:
        return module_name in module_names()

    def module(self, module_name: str) -> DeploymentModule:
        """
        Get a deployment module descriptor.

        Raises:
            DeploymentModuleNotFoundError: If module is not declared
        """
        return get_module(module_name)

    def networks(self) -> List[str]:
        """Names of configured networks."""
        return list(self._config.networks.keys())

    def has_network(self, network: str) -> bool:
        return network in self._config.networks

    def network_info(self, network: str) -> Dict[str, Any]:
        """
        Get network information (chain ID, name, explorer URL).

        Args:
            network: Network name ("polygon" or "amoy")

        Returns:
            Dictionary with chain_id, chain_name, block_explorer_url

        Raises:
            NetworkNotFoundError: If network not configured
        """
        if not self.has_network(network):
            raise NetworkNotFoundError(f"Network '{network}' not found in configuration")

        endpoint = self._config.networks[network]
        return {
            "chain_id": endpoint.chain_id,
            "chain_name": endpoint.chain_name,
            "block_explorer_url": endpoint.block_explorer_url,
        }

    def overrides(
        self, module_name: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Combine parameters-file overrides with explicit overrides.

        Explicit overrides win over the parameters file. Global values are
        kept only for parameters the module declares.
        """
        module = get_module(module_name)
        combined = module_overrides(
            self._parameters,
            module_name,
            declared=[param.name for param in module.parameters],
        )
        if overrides:
            combined |= overrides
        return combined

    def parameters(
        self, module_name: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Get resolved parameter values for a module.

        Args:
            module_name: Module name
            overrides: Explicit overrides (take precedence over the parameters file)

        Returns:
            Parameter name -> resolved value

        Raises:
            DeploymentModuleNotFoundError: If module is not declared
            ParameterNotFoundError: If an override names an undeclared parameter
            InvalidParameterError: If an override value is invalid
        """
        module = get_module(module_name)
        return resolve_parameters(module, self.overrides(module_name, overrides))

    def instantiation(
        self, module_name: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> ContractInstantiation:
        """
        Get the contract-instantiation instruction for a module.

        Raises:
            DeploymentModuleNotFoundError: If module is not declared
            ParameterNotFoundError: If an override names an undeclared parameter
            InvalidParameterError: If an override value is invalid
        """
        module = get_module(module_name)
        return instantiate(module, self.overrides(module_name, overrides))

    def plan(
        self,
        module_name: str,
        network: str,
        overrides: Optional[Mapping[str, Any]] = None,
        check_chain: bool = False,
    ) -> DeploymentPlan:
        """
        Build a deployment plan for a module on a network.

        Args:
            module_name: Module name
            network: Network name ("polygon" or "amoy")
            overrides: Explicit parameter overrides
            check_chain: Query the RPC and compare its chain ID

        Returns:
            DeploymentPlan

        Raises:
            NetworkNotFoundError: If network not configured
            MissingEnvironmentError: If RPC URL or signing credential is absent
            ChainIdMismatchError: If ``check_chain`` and the RPC reports another chain
        """
        instantiation = self.instantiation(module_name, overrides)

        if check_chain:
            endpoint = check_network(self._config, network)
        else:
            validate_config(self._config, [network])
            endpoint = self._config.networks[network]

        logger.info(
            "Planned %s on %s (chain %d) with args %r",
            instantiation.contract_name,
            network,
            endpoint.chain_id,
            instantiation.args,
        )
        return DeploymentPlan(
            instantiation=instantiation,
            network=endpoint,
            solidity=self._config.solidity,
        )

    def deployed_addresses(self, network: str) -> Dict[str, str]:
        """
        Get recorded deployed addresses for a network.

        Args:
            network: Network name ("polygon" or "amoy")

        Returns:
            Future ID -> address; empty if nothing was deployed on that chain

        Raises:
            NetworkNotFoundError: If network not configured
        """
        chain_id = self.network_info(network)["chain_id"]
        path = get_deployed_addresses_path(chain_id, self._project_root)
        if not path.exists():
            return {}
        return parse_deployed_addresses(path)

    def deployed_address(self, module_name: str, network: str) -> str:
        """
        Get the deployed address of a module's contract.

        Raises:
            DeploymentModuleNotFoundError: If module is not declared
            NetworkNotFoundError: If network not configured
            ContractNotDeployedError: If no address is recorded
        """
        module = get_module(module_name)
        addresses = self.deployed_addresses(network)
        if module.future_id not in addresses:
            raise ContractNotDeployedError(
                f"Contract '{module.contract_name}' from '{module_name}' "
                f"is not deployed on network '{network}'"
            )
        return addresses[module.future_id]

    def explorer_url(self, module_name: str, network: str) -> str:
        """
        Get the block explorer URL of a module's deployed contract.

        Raises:
            ContractNotDeployedError: If no address is recorded
        """
        address = self.deployed_address(module_name, network)
        explorer = self.network_info(network)["block_explorer_url"]
        return f"{explorer}/address/{address}"
