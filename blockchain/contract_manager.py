"""
Contract Manager
Resolves compiled Hardhat artifacts and builds contract instances
"""

import json
from pathlib import Path
from typing import Dict
from web3 import Web3
from loguru import logger

from .exceptions import ArtifactNotFoundError


class ContractManager:
    """
    Loads compiled contract artifacts from a Hardhat artifacts directory

    Artifacts are expected at artifacts/contracts/<Name>.sol/<Name>.json;
    anything else under the artifacts directory is searched by contractName.
    """

    def __init__(self, w3: Web3, artifacts_dir: str = "artifacts"):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            artifacts_dir: Root of the compiled artifacts tree
        """
        self.w3 = w3
        self.artifacts_dir = Path(artifacts_dir)

        logger.debug(f"Contract Manager initialized (artifacts: {self.artifacts_dir})")

    def load_artifact(self, contract_name: str) -> Dict:
        """
        Load the compiled artifact for a contract

        Args:
            contract_name: Contract name as declared in Solidity

        Returns:
            Dict with 'contractName', 'abi' and 'bytecode'

        Raises:
            ArtifactNotFoundError: missing, ambiguous, unreadable or abstract artifact
        """
        artifact_path = self._find_artifact(contract_name)

        try:
            with open(artifact_path, 'r') as f:
                artifact = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ArtifactNotFoundError(
                f"Could not read artifact for {contract_name} at {artifact_path}: {e}"
            ) from e

        if 'abi' not in artifact or 'bytecode' not in artifact:
            raise ArtifactNotFoundError(
                f"Artifact {artifact_path} is missing 'abi' or 'bytecode'"
            )

        # Interfaces and abstract contracts compile to empty bytecode
        if artifact['bytecode'] in ('', '0x'):
            raise ArtifactNotFoundError(
                f"{contract_name} is abstract or an interface and cannot be deployed"
            )

        logger.info(f"Loaded artifact for {contract_name}: {artifact_path}")
        return artifact

    def get_contract(self, artifact: Dict):
        """Build an undeployed web3 contract class from an artifact"""
        return self.w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])

    def _find_artifact(self, contract_name: str) -> Path:
        """Locate the artifact file for a contract name"""
        default_path = (
            self.artifacts_dir / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"
        )

        if default_path.is_file():
            return default_path

        if not self.artifacts_dir.is_dir():
            raise ArtifactNotFoundError(
                f"Artifacts directory not found: {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        candidates = [
            path for path in sorted(self.artifacts_dir.rglob(f"{contract_name}.json"))
            if not path.name.endswith('.dbg.json') and self._declares(path, contract_name)
        ]

        if not candidates:
            raise ArtifactNotFoundError(
                f"Artifact for contract {contract_name} not found in {self.artifacts_dir}"
            )

        if len(candidates) > 1:
            paths = ', '.join(str(path) for path in candidates)
            raise ArtifactNotFoundError(
                f"Multiple artifacts match {contract_name}: {paths}"
            )

        return candidates[0]

    def _declares(self, path: Path, contract_name: str) -> bool:
        """Check the artifact's contractName, skipping unreadable files"""
        try:
            with open(path, 'r') as f:
                return json.load(f).get('contractName') == contract_name
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.warning(f"Skipping unreadable artifact {path}: {e}")
            return False
