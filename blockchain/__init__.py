"""
Blockchain Interaction Package
Handles contract artifacts, deployment transactions and confirmation
"""

from .exceptions import (
    ToolchainError,
    ArtifactNotFoundError,
    DeploymentError,
    ConfirmationError
)
from .contract_manager import ContractManager
from .transaction_builder import TransactionBuilder
from .contract_factory import ContractFactory, PendingDeployment, DeployedContract
from .toolchain import Web3Toolchain

__all__ = [
    'ToolchainError',
    'ArtifactNotFoundError',
    'DeploymentError',
    'ConfirmationError',
    'ContractManager',
    'TransactionBuilder',
    'ContractFactory',
    'PendingDeployment',
    'DeployedContract',
    'Web3Toolchain'
]
