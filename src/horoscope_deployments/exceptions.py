"""Custom exception classes for horoscope-deployments library."""

from typing import Iterable


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the toolchain configuration cannot be used."""

    pass


class MissingEnvironmentError(ConfigurationError):
    """Raised when required environment values are absent or empty."""

    def __init__(self, message: str, names: Iterable[str] = ()):
        super().__init__(message)
        self.names = list(names)


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not configured."""

    pass


class DeploymentModuleNotFoundError(DeploymentError, ValueError):
    """Raised when requested deployment module is not declared."""

    pass


class ParameterNotFoundError(DeploymentError, ValueError):
    """Raised when an override names a parameter the module does not declare."""

    pass


class InvalidParameterError(DeploymentError, ValueError):
    """Raised when an override value has the wrong type or format."""

    pass


class ParametersFileNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when an explicitly requested parameters file is not found."""

    pass


class ContractNotDeployedError(DeploymentError, ValueError):
    """Raised when no deployed address is recorded for a module on a chain."""

    pass


class ChainIdMismatchError(DeploymentError, ValueError):
    """Raised when an RPC endpoint reports a different chain than configured."""

    pass
