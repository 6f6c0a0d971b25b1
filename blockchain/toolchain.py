"""
Web3 Toolchain
Contract deployment toolchain backed by web3.py and Hardhat artifacts

Any object with the same shape can be handed to the deployer:

    toolchain.get_contract_factory(name) -> factory
    factory.deploy(*args) -> pending
    await pending.wait_for_confirmation() -> deployed
    deployed.address
"""

from typing import Dict
from web3 import Web3
from loguru import logger

from deployer.wallet_manager import WalletManager
from utils.rpc_manager import RPCManager

from .contract_manager import ContractManager
from .contract_factory import ContractFactory
from .transaction_builder import TransactionBuilder


class Web3Toolchain:
    """
    Resolves contract factories against a connected node
    """

    def __init__(
        self,
        w3: Web3,
        wallet_manager: WalletManager,
        contract_manager: ContractManager,
        tx_builder: TransactionBuilder,
        settings: Dict = None
    ):
        """
        Initialize Web3 Toolchain

        Args:
            w3: Connected Web3 instance
            wallet_manager: Deployer account
            contract_manager: Artifact loader
            tx_builder: Deployment transaction builder
            settings: 'toolchain' section of the deploy config
        """
        settings = settings or {}

        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.contract_manager = contract_manager
        self.tx_builder = tx_builder
        self.confirmation_timeout = settings.get('confirmation_timeout', 300)
        self.poll_interval = settings.get('poll_interval', 2)
        self.confirmations = settings.get('confirmations', 1)

    @classmethod
    def from_config(cls, config: Dict) -> 'Web3Toolchain':
        """
        Build a toolchain from the deploy config and environment

        Args:
            config: Full deploy config

        Returns:
            Web3Toolchain
        """
        settings = config.get('toolchain', {})

        w3 = RPCManager.from_config(config.get('network', {})).get_web3()
        wallet_manager = WalletManager(w3)
        contract_manager = ContractManager(w3, settings.get('artifacts_dir', 'artifacts'))
        tx_builder = TransactionBuilder(
            w3,
            gas_buffer=settings.get('gas_buffer', 1.2),
            default_gas_limit=settings.get('default_gas_limit', 3000000),
            gas_fallback=settings.get('gas_fallback', False)
        )

        logger.info(f"Account balance: {wallet_manager.get_balance()} ETH")

        return cls(w3, wallet_manager, contract_manager, tx_builder, settings)

    def get_contract_factory(self, contract_name: str) -> ContractFactory:
        """
        Get a deployable factory for a compiled contract

        Raises:
            ArtifactNotFoundError: no usable artifact for contract_name
        """
        artifact = self.contract_manager.load_artifact(contract_name)

        return ContractFactory(
            self.w3,
            contract_name,
            artifact,
            self.contract_manager,
            self.tx_builder,
            self.wallet_manager,
            confirmation_timeout=self.confirmation_timeout,
            poll_interval=self.poll_interval,
            confirmations=self.confirmations
        )
