"""Deployment module descriptors and parameter resolution."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from web3 import Web3

from .constants import (
    DAPP_SIGNER_ADDRESS,
    QUIZZ_MAX_ADDRESSES,
    UMBRELLA_MAX_ADDRESSES,
    WHITELIST_UMBRELLA_CORP_ADDRESS,
)
from .exceptions import (
    DeploymentModuleNotFoundError,
    InvalidParameterError,
    ParameterNotFoundError,
)
from .types import ContractInstantiation, DeploymentModule, DeploymentParameter

logger = logging.getLogger(__name__)


HOROSCOPE_NFT_V3_MODULE = DeploymentModule(
    name="HoroscopeNFTv3Module",
    contract_name="HoroscopeNFTv3",
    parameters=[
        DeploymentParameter("dAppSigner", DAPP_SIGNER_ADDRESS),
    ],
    constructor_args=["dAppSigner"],
)

WHITELIST_UMBRELLA_MODULE = DeploymentModule(
    name="WhitelistUmbrellaModule",
    contract_name="WhitelistUmbrella",
    parameters=[
        DeploymentParameter("dAppSigner", DAPP_SIGNER_ADDRESS),
        DeploymentParameter("maxWhitelistedAddresses", UMBRELLA_MAX_ADDRESSES),
    ],
    constructor_args=["maxWhitelistedAddresses", "dAppSigner"],
)

WHITELIST_QUIZZ_MODULE = DeploymentModule(
    name="WhitelistQuizzModule",
    contract_name="WhitelistQuizz",
    parameters=[
        DeploymentParameter("dAppSigner", DAPP_SIGNER_ADDRESS),
        DeploymentParameter("maxWhitelistedAddresses", QUIZZ_MAX_ADDRESSES),
        DeploymentParameter("whitelistUmbrellaContract", WHITELIST_UMBRELLA_CORP_ADDRESS),
    ],
    constructor_args=[
        "maxWhitelistedAddresses",
        "dAppSigner",
        "whitelistUmbrellaContract",
    ],
)

MODULES: Dict[str, DeploymentModule] = {
    module.name: module
    for module in (
        HOROSCOPE_NFT_V3_MODULE,
        WHITELIST_UMBRELLA_MODULE,
        WHITELIST_QUIZZ_MODULE,
    )
}


def module_names() -> List[str]:
    """Names of all declared deployment modules, in declaration order."""
    return list(MODULES.keys())


def get_module(name: str) -> DeploymentModule:
    """
    Look up a deployment module by name.

    Args:
        name: Module name, e.g. "WhitelistQuizzModule"

    Returns:
        DeploymentModule

    Raises:
        DeploymentModuleNotFoundError: If no module has that name
    """
    if name not in MODULES:
        raise DeploymentModuleNotFoundError(f"Deployment module '{name}' not found")
    return MODULES[name]


def coerce_parameter(param: DeploymentParameter, value: Any) -> Any:
    """
    Validate an override value against the parameter's kind.

    Address values are returned verbatim. Integer values may be given as
    decimal strings.

    Args:
        param: Declared parameter
        value: Override value

    Returns:
        Value to pass to the constructor

    Raises:
        InvalidParameterError: If the value is not a valid address or
                               non-negative integer
    """
    if param.is_address:
        if not isinstance(value, str) or not Web3.is_address(value):
            raise InvalidParameterError(
                f"Parameter '{param.name}' expects an address, got {value!r}"
            )
        return value

    # bool is an int subclass
    if isinstance(value, bool):
        raise InvalidParameterError(
            f"Parameter '{param.name}' expects an integer, got {value!r}"
        )
    if isinstance(value, str) and value.isascii() and value.isdecimal():
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise InvalidParameterError(
            f"Parameter '{param.name}' expects a non-negative integer, got {value!r}"
        )
    return value


def resolve_parameters(
    module: DeploymentModule, overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Resolve every declared parameter to its override or default.

    Args:
        module: Deployment module
        overrides: Parameter name -> value

    Returns:
        Dictionary of parameter name -> resolved value, in declaration order

    Raises:
        ParameterNotFoundError: If an override names an undeclared parameter
        InvalidParameterError: If an override value is invalid
    """
    overrides = overrides or {}

    for name in overrides:
        if module.parameter(name) is None:
            raise ParameterNotFoundError(
                f"Parameter '{name}' is not declared by module '{module.name}'"
            )

    resolved: Dict[str, Any] = {}
    for param in module.parameters:
        if param.name in overrides:
            resolved[param.name] = coerce_parameter(param, overrides[param.name])
            logger.debug(
                "%s.%s overridden with %r", module.name, param.name, resolved[param.name]
            )
        else:
            resolved[param.name] = param.default

    return resolved


def instantiate(
    module: DeploymentModule, overrides: Optional[Mapping[str, Any]] = None
) -> ContractInstantiation:
    """
    Build the contract-instantiation instruction for a module.

    Args:
        module: Deployment module
        overrides: Parameter name -> value

    Returns:
        ContractInstantiation with constructor args in declared order
    """
    parameters = resolve_parameters(module, overrides)
    return ContractInstantiation(
        module_name=module.name,
        contract_name=module.contract_name,
        args=[parameters[name] for name in module.constructor_args],
        parameters=parameters,
        future_id=module.future_id,
    )
