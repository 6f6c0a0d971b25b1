"""
Contract Deployment Entry Point
Deploys the configured contract (Project by default) and prints its address
"""

import asyncio
import sys
from typing import Dict
from loguru import logger

from blockchain.toolchain import Web3Toolchain
from deployer.config import CONFIG_PATH, load_config
from deployer.deployer import ContractDeployer


def setup_logging(settings: Dict):
    """Configure loguru sinks: stderr, plus a rotating file when configured"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=settings.get('level', 'INFO')
    )

    if settings.get('file'):
        logger.add(
            settings['file'],
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def main(config_path: str = CONFIG_PATH, toolchain_factory=None) -> int:
    """
    Run one deployment

    Args:
        config_path: Deploy config file
        toolchain_factory: Callable building the toolchain from the config

    Returns:
        Process exit status
    """
    try:
        config = load_config(config_path)
    except Exception:
        setup_logging({})
        logger.exception(f"Could not load {config_path}")
        return 1

    try:
        setup_logging(config['logging'])
    except Exception:
        setup_logging({})
        logger.exception("Invalid logging configuration")
        return 1

    try:
        toolchain = (toolchain_factory or Web3Toolchain.from_config)(config)
        deployer = ContractDeployer(
            toolchain,
            contract_name=config['contract']['name'],
            constructor_args=config['contract']['constructor_args']
        )
    except Exception:
        logger.exception("Could not initialize contract toolchain")
        return 1

    return asyncio.run(deployer.run())


if __name__ == "__main__":
    sys.exit(main())
