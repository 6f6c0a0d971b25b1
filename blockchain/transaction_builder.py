"""
Transaction Builder
Constructs contract-creation transactions
"""

from typing import Dict
from web3 import Web3
from loguru import logger


class TransactionBuilder:
    """
    Builds deployment transactions for contract constructors
    """

    def __init__(
        self,
        w3: Web3,
        gas_buffer: float = 1.2,
        default_gas_limit: int = 3000000,
        gas_fallback: bool = False
    ):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            gas_buffer: Multiplier applied to the gas estimate
            default_gas_limit: Gas limit used when estimation fails and gas_fallback is set
            gas_fallback: Send with default_gas_limit instead of failing when estimation fails
        """
        self.w3 = w3
        self.gas_buffer = gas_buffer
        self.default_gas_limit = default_gas_limit
        self.gas_fallback = gas_fallback

    def estimate_gas_limit(self, constructor, from_address: str) -> int:
        """
        Estimate gas for a constructor call, with buffer

        Args:
            constructor: web3 ContractConstructor
            from_address: Sender address

        Returns:
            Gas limit

        Raises:
            Exception from the node when estimation fails and gas_fallback is off
        """
        try:
            gas_estimate = constructor.estimate_gas({'from': from_address})
            return int(gas_estimate * self.gas_buffer)
        except Exception as e:
            if not self.gas_fallback:
                logger.error(f"Gas estimation failed: {e}")
                raise

            logger.warning(f"Gas estimation failed: {e}, using default")
            return self.default_gas_limit

    def build_deployment_tx(self, constructor, from_address: str) -> Dict:
        """
        Build a signed-ready deployment transaction

        Args:
            constructor: web3 ContractConstructor with arguments bound
            from_address: Sender address

        Returns:
            Transaction dict
        """
        nonce = self.w3.eth.get_transaction_count(from_address)
        gas_price = self.w3.eth.gas_price
        gas_limit = self.estimate_gas_limit(constructor, from_address)

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

        transaction = constructor.build_transaction({
            'from': from_address,
            'nonce': nonce,
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': self.w3.eth.chain_id
        })

        deployment_cost = self.w3.from_wei(gas_limit * gas_price, 'ether')
        logger.info(f"Estimated deployment cost: {deployment_cost} ETH")

        return transaction
