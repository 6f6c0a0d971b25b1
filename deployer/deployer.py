"""
Contract Deployer
Requests a contract factory, deploys, awaits confirmation and reports the address
"""

import sys
from typing import Optional, Sequence
from loguru import logger


async def deploy_contract(toolchain, contract_name: str, constructor_args: Sequence = ()):
    """
    Deploy a contract and wait for it to be confirmed

    Errors from the toolchain propagate unchanged.

    Args:
        toolchain: Object providing get_contract_factory(name)
        contract_name: Compiled contract name
        constructor_args: Positional constructor arguments

    Returns:
        Deployed contract (exposes .address)
    """
    factory = toolchain.get_contract_factory(contract_name)
    pending = factory.deploy(*constructor_args)
    return await pending.wait_for_confirmation()


class ContractDeployer:
    """
    Runs a single deployment and maps its outcome to an exit status
    """

    def __init__(
        self,
        toolchain,
        contract_name: str = "Project",
        constructor_args: Optional[Sequence] = None,
        stdout=None
    ):
        """
        Initialize Contract Deployer

        Args:
            toolchain: Contract deployment toolchain
            contract_name: Contract to deploy
            constructor_args: Positional constructor arguments
            stdout: Stream for the result line (sys.stdout when None)
        """
        self.toolchain = toolchain
        self.contract_name = contract_name
        self.constructor_args = list(constructor_args or [])
        self.stdout = stdout

    async def run(self) -> int:
        """
        Run the deployment

        Returns:
            0 on success, 1 if any step failed
        """
        try:
            deployed = await deploy_contract(
                self.toolchain,
                self.contract_name,
                self.constructor_args
            )
            address = deployed.address
        except Exception:
            logger.exception(f"Deployment of {self.contract_name} failed")
            return 1

        print(
            f"{self.contract_name} deployed to: {address}",
            file=self.stdout or sys.stdout
        )
        return 0
