"""Ignition parameter and result file parsers for horoscope-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .constants import GLOBAL_PARAMETERS_KEY


def parse_parameters_file(file_path: Path) -> Dict[str, Dict[str, Any]]:
    """
    Parse an Ignition parameters JSON file.

    Expected layout::

        {
          "$global": {"dAppSigner": "0x..."},
          "WhitelistQuizzModule": {"maxWhitelistedAddresses": 100}
        }

    Args:
        file_path: Path to parameters JSON file

    Returns:
        Dictionary mapping module name (or "$global") to parameter overrides

    Raises:
        ValueError: If the file is not a JSON object of objects
    """
    with open(file_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Parameters file must contain a JSON object: {file_path}")

    result: Dict[str, Dict[str, Any]] = {}
    for module_name, params in data.items():
        if not isinstance(params, dict):
            raise ValueError(
                f"Parameters for '{module_name}' must be a JSON object in {file_path}"
            )
        result[module_name] = dict(params)

    return result


def module_overrides(
    parameters: Dict[str, Dict[str, Any]],
    module_name: str,
    declared: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Get the overrides that apply to one module.

    Global values apply to every module that declares them; module-specific
    values win.

    Args:
        parameters: Parsed parameters file
        module_name: Module name
        declared: Parameter names the module declares (defaults to keeping
                  every global value)

    Returns:
        Parameter name -> override value
    """
    overrides = dict(parameters.get(GLOBAL_PARAMETERS_KEY, {}))
    if declared is not None:
        declared = set(declared)
        overrides = {name: value for name, value in overrides.items() if name in declared}
    overrides |= parameters.get(module_name, {})
    return overrides


def parse_deployed_addresses(file_path: Path) -> Dict[str, str]:
    """
    Parse an Ignition deployed_addresses.json file.

    Args:
        file_path: Path to deployed_addresses.json

    Returns:
        Dictionary mapping future ID ("<module>#<contract>") to address

    Raises:
        ValueError: If the file is not a JSON object
    """
    with open(file_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Deployed addresses file must contain a JSON object: {file_path}")

    return dict(data)


def split_future_id(future_id: str) -> tuple[str, str]:
    """
    Split a future ID into module and contract names.

    Args:
        future_id: e.g. "WhitelistQuizzModule#WhitelistQuizz"

    Returns:
        Tuple of (module_name, contract_name)

    Raises:
        ValueError: If the ID has no '#' separator
    """
    module_name, sep, contract_name = future_id.partition("#")
    if not sep or not module_name or not contract_name:
        raise ValueError(f"Invalid future ID: {future_id!r}")
    return module_name, contract_name
