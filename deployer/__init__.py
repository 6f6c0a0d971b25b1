"""
Deployer Package
Single-contract deployment flow and its configuration
"""

from .config import load_config, DEFAULT_CONFIG
from .deployer import ContractDeployer, deploy_contract
from .wallet_manager import WalletManager

__all__ = [
    'load_config',
    'DEFAULT_CONFIG',
    'ContractDeployer',
    'deploy_contract',
    'WalletManager'
]
