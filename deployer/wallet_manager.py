"""
Wallet Manager
Holds the deployer account used to sign contract-creation transactions
"""

import os
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

load_dotenv()


class WalletManager:
    """
    Manages the deployer account:
    - Local key from DEPLOYER_PRIVATE_KEY: transactions are signed here
    - No key: falls back to the node's first unlocked account (Hardhat node)
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            w3: Web3 instance
            private_key: Overrides DEPLOYER_PRIVATE_KEY when given
        """
        self.w3 = w3
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        if private_key:
            self.account = Account.from_key(private_key)
            self.deployer_address = self.account.address
            logger.info(f"Deployer wallet: {self.deployer_address}")
        else:
            self.account = None
            self.deployer_address = self._get_node_account()
            logger.info(f"Deployer wallet (node account): {self.deployer_address}")

    @property
    def can_sign(self) -> bool:
        """True when transactions are signed locally"""
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.can_sign:
            raise ValueError("No DEPLOYER_PRIVATE_KEY configured; transactions are node-signed")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_balance(self):
        """Get deployer balance in ether"""
        balance_wei = self.w3.eth.get_balance(self.deployer_address)
        return self.w3.from_wei(balance_wei, 'ether')

    def _get_node_account(self) -> str:
        """First account managed by the connected node"""
        accounts = self.w3.eth.accounts

        if not accounts:
            raise ValueError(
                "DEPLOYER_PRIVATE_KEY must be set in .env (node has no unlocked accounts)"
            )

        return accounts[0]
