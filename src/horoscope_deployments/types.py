"""Data types and dataclasses for horoscope-deployments library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

ParameterValue = Union[str, int]


@dataclass
class NetworkEndpoint:
    """RPC endpoint, chain and signing credential for one network."""

    # Required fields
    name: str  # e.g., "polygon"
    url: Optional[str]  # RPC URL, None when unset in the environment
    chain_id: int  # e.g., 137
    signing_credential: Optional[str]  # 0x-prefixed private key

    # Optional fields
    chain_name: Optional[str] = None
    block_explorer_url: Optional[str] = None

    @property
    def accounts(self) -> List[str]:
        """Signing accounts in the shape the deployment runtime expects."""
        if self.signing_credential is None:
            return []
        return [self.signing_credential]

    def is_ready(self) -> bool:
        """True when both the RPC URL and the signing credential are set."""
        return bool(self.url) and bool(self.signing_credential)


@dataclass
class CompilerSettings:
    """Solidity compiler version and optimizer flags."""

    version: str
    optimizer_enabled: bool = False
    optimizer_runs: int = 200


@dataclass
class ToolchainConfig:
    """Complete build/deploy configuration assembled from the environment."""

    default_network: str
    solidity: CompilerSettings
    networks: Dict[str, NetworkEndpoint]
    etherscan_api_key: Optional[str] = None
    sourcify_enabled: bool = True
    gas_reporter_enabled: bool = True


@dataclass
class DeploymentParameter:
    """Externally overridable module parameter with a literal default."""

    name: str
    default: ParameterValue

    @property
    def is_address(self) -> bool:
        return isinstance(self.default, str)


@dataclass
class DeploymentModule:
    """
    Declarative deployment recipe for a single contract.

    ``constructor_args`` lists parameter names in the order the contract
    constructor takes them.
    """

    name: str  # e.g., "WhitelistQuizzModule"
    contract_name: str  # e.g., "WhitelistQuizz"
    parameters: List[DeploymentParameter] = field(default_factory=list)
    constructor_args: List[str] = field(default_factory=list)

    @property
    def future_id(self) -> str:
        """Key under which the deployed address is recorded."""
        return f"{self.name}#{self.contract_name}"

    def parameter(self, name: str) -> Optional[DeploymentParameter]:
        for param in self.parameters:
            if param.name == name:
                return param
        return None


@dataclass
class ContractInstantiation:
    """Instruction to deploy ``contract_name`` with ``args``."""

    module_name: str
    contract_name: str
    args: List[Any]
    parameters: Dict[str, Any]
    future_id: str


@dataclass
class DeploymentPlan:
    """Everything the deployment runtime needs to deploy one module."""

    instantiation: ContractInstantiation
    network: NetworkEndpoint
    solidity: CompilerSettings
