"""
RPC Manager
Resolves the node endpoint from the environment, in priority order
"""

import os
from typing import Dict, List, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


class RPCManager:
    """
    Endpoint resolution:

    1. Each env var in rpc_url_envs, in order (first connected wins)
    2. default_rpc_url (local Hardhat node) as last resort
    """

    def __init__(
        self,
        rpc_url_envs: Optional[List[str]] = None,
        default_rpc_url: Optional[str] = DEFAULT_RPC_URL
    ):
        """
        Initialize RPC Manager

        Args:
            rpc_url_envs: Env var names holding HTTP RPC URLs
            default_rpc_url: Fallback URL, None to disable
        """
        self.rpc_url_envs = rpc_url_envs if rpc_url_envs is not None else ['RPC_URL']
        self.default_rpc_url = default_rpc_url
        self.endpoints = self._init_endpoints()
        self.w3 = None
        self.current_endpoint = None

    @classmethod
    def from_config(cls, network_config: Dict) -> 'RPCManager':
        return cls(
            rpc_url_envs=network_config.get('rpc_url_envs'),
            default_rpc_url=network_config.get('default_rpc_url', DEFAULT_RPC_URL)
        )

    def _init_endpoints(self) -> List[Dict]:
        """Collect configured endpoints in priority order"""
        endpoints = []

        for env_name in self.rpc_url_envs:
            url = os.getenv(env_name)
            if url:
                endpoints.append({'name': env_name, 'http_url': url})

        if self.default_rpc_url:
            endpoints.append({'name': 'default', 'http_url': self.default_rpc_url})

        return endpoints

    def get_web3(self) -> Web3:
        """
        Get a connected Web3 instance

        Raises:
            ConnectionError: no endpoint could be reached
        """
        if self.w3 is not None:
            return self.w3

        for endpoint in self.endpoints:
            try:
                w3 = Web3(Web3.HTTPProvider(endpoint['http_url']))

                if w3.is_connected():
                    self.w3 = w3
                    self.current_endpoint = endpoint
                    logger.success(f"Connected to {endpoint['name']} (chain id: {w3.eth.chain_id})")
                    return w3

                logger.warning(f"Failed to connect to {endpoint['name']}")

            except Exception as e:
                logger.warning(f"Error connecting to {endpoint['name']}: {e}")

        tried = ', '.join(endpoint['name'] for endpoint in self.endpoints) or 'none configured'
        raise ConnectionError(f"No RPC endpoint available (tried: {tried})")
