"""
Contract Factory
Deploys a compiled contract and tracks the pending deployment until confirmed
"""

import asyncio
import time
from typing import Dict, Optional
from web3 import Web3
from web3.exceptions import TransactionNotFound
from loguru import logger

from .exceptions import DeploymentError, ConfirmationError


class DeployedContract:
    """A confirmed contract deployment"""

    def __init__(
        self,
        name: str,
        address: str,
        transaction_hash: str,
        receipt=None,
        contract=None
    ):
        self.name = name
        self.address = address
        self.transaction_hash = transaction_hash
        self.receipt = receipt
        self.contract = contract

    def __repr__(self):
        return f"DeployedContract(name={self.name!r}, address={self.address!r})"


class PendingDeployment:
    """
    A submitted contract-creation transaction awaiting confirmation
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        abi: list,
        tx_hash: bytes,
        timeout: float = 300,
        poll_interval: float = 2,
        confirmations: int = 1
    ):
        """
        Initialize Pending Deployment

        Args:
            w3: Web3 instance
            contract_name: Name of the contract being deployed
            abi: Contract ABI, used to bind the deployed instance
            tx_hash: Deployment transaction hash
            timeout: Seconds to wait before giving up
            poll_interval: Seconds between receipt lookups
            confirmations: Blocks required on top of (and including) the receipt block
        """
        self.w3 = w3
        self.contract_name = contract_name
        self.abi = abi
        self.tx_hash = tx_hash
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.confirmations = max(1, confirmations)

    @property
    def transaction_hash(self) -> str:
        return Web3.to_hex(self.tx_hash)

    async def wait_for_confirmation(self) -> DeployedContract:
        """
        Wait until the deployment transaction is mined and confirmed

        Returns:
            DeployedContract

        Raises:
            ConfirmationError: timeout, reverted transaction or missing contract address
        """
        logger.info(f"Waiting for confirmation of {self.transaction_hash}...")

        start_time = time.time()
        receipt = None

        while time.time() - start_time < self.timeout:
            receipt = self._get_receipt()

            if receipt is not None and self._confirmation_count(receipt) >= self.confirmations:
                break

            await asyncio.sleep(self.poll_interval)
        else:
            if receipt is None:
                raise ConfirmationError(
                    f"Transaction {self.transaction_hash} was not mined within "
                    f"{self.timeout}s (dropped or underpriced)"
                )
            raise ConfirmationError(
                f"Transaction {self.transaction_hash} did not reach "
                f"{self.confirmations} confirmations within {self.timeout}s"
            )

        if receipt['status'] != 1:
            raise ConfirmationError(
                f"Deployment of {self.contract_name} reverted (tx: {self.transaction_hash})"
            )

        contract_address = receipt.get('contractAddress')

        if not contract_address:
            raise ConfirmationError(
                f"Receipt for {self.transaction_hash} has no contract address"
            )

        logger.success(f"Contract {self.contract_name} confirmed at {contract_address}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return DeployedContract(
            name=self.contract_name,
            address=contract_address,
            transaction_hash=self.transaction_hash,
            receipt=receipt,
            contract=self.w3.eth.contract(address=contract_address, abi=self.abi)
        )

    def _get_receipt(self) -> Optional[Dict]:
        """Fetch the receipt, None while the transaction is still pending"""
        try:
            return self.w3.eth.get_transaction_receipt(self.tx_hash)
        except TransactionNotFound:
            return None
        except Exception as e:
            raise ConfirmationError(
                f"Error fetching receipt for {self.transaction_hash}: {e}"
            ) from e

    def _confirmation_count(self, receipt: Dict) -> int:
        """Number of blocks including and on top of the receipt's block"""
        if self.confirmations == 1:
            return 1

        try:
            current_block = self.w3.eth.block_number
        except Exception as e:
            raise ConfirmationError(f"Error fetching block number: {e}") from e

        return current_block - receipt['blockNumber'] + 1


class ContractFactory:
    """
    Deploys instances of one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        artifact: Dict,
        contract_manager,
        tx_builder,
        wallet_manager,
        confirmation_timeout: float = 300,
        poll_interval: float = 2,
        confirmations: int = 1
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            contract_name: Contract name
            artifact: Compiled artifact (abi, bytecode)
            contract_manager: ContractManager building contract classes
            tx_builder: TransactionBuilder for deployment transactions
            wallet_manager: WalletManager holding the deployer account
            confirmation_timeout: Seconds to wait for confirmation
            poll_interval: Seconds between receipt lookups
            confirmations: Required confirmations
        """
        self.w3 = w3
        self.contract_name = contract_name
        self.artifact = artifact
        self.contract_manager = contract_manager
        self.tx_builder = tx_builder
        self.wallet_manager = wallet_manager
        self.confirmation_timeout = confirmation_timeout
        self.poll_interval = poll_interval
        self.confirmations = confirmations

    def deploy(self, *constructor_args) -> PendingDeployment:
        """
        Submit the contract-creation transaction

        Args:
            *constructor_args: Positional constructor arguments

        Returns:
            PendingDeployment

        Raises:
            DeploymentError: building, signing or sending failed
        """
        try:
            contract = self.contract_manager.get_contract(self.artifact)
            constructor = contract.constructor(*constructor_args)
            from_address = self.wallet_manager.deployer_address

            logger.info(f"Deploying {self.contract_name} from: {from_address}")

            if self.wallet_manager.can_sign:
                transaction = self.tx_builder.build_deployment_tx(constructor, from_address)
                signed_tx = self.wallet_manager.sign_transaction(transaction)
                tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            else:
                # Node-managed account (e.g. Hardhat local node)
                tx_hash = constructor.transact({'from': from_address})

        except Exception as e:
            raise DeploymentError(f"Failed to deploy {self.contract_name}: {e}") from e

        pending = PendingDeployment(
            self.w3,
            self.contract_name,
            self.artifact['abi'],
            tx_hash,
            timeout=self.confirmation_timeout,
            poll_interval=self.poll_interval,
            confirmations=self.confirmations
        )

        logger.info(f"Transaction sent: {pending.transaction_hash}")
        return pending
