"""
Deploy Configuration
Loads config/deploy_config.json over built-in defaults
"""

import copy
import json
import os
from typing import Dict

CONFIG_PATH = "config/deploy_config.json"

DEFAULT_CONFIG = {
    'contract': {
        'name': 'Project',
        'constructor_args': []
    },
    'toolchain': {
        'artifacts_dir': 'artifacts',
        'confirmation_timeout': 300,
        'poll_interval': 2,
        'confirmations': 1,
        'gas_buffer': 1.2,
        'default_gas_limit': 3000000,
        'gas_fallback': False
    },
    'network': {
        'rpc_url_envs': ['RPC_URL'],
        'default_rpc_url': 'http://127.0.0.1:8545'
    },
    'logging': {
        'level': 'INFO',
        'file': 'data/logs/deploy.log'
    }
}


def load_config(config_path: str = CONFIG_PATH) -> Dict:
    """
    Load deploy configuration

    Args:
        config_path: JSON config file; defaults are used when it does not exist

    Returns:
        Config dict with every section present

    Raises:
        ValueError: file is not valid JSON or not an object
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, 'r') as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(overrides, dict):
        raise ValueError(f"{config_path} must contain a JSON object")

    for section, values in overrides.items():
        if section in DEFAULT_CONFIG and not isinstance(values, dict):
            raise ValueError(f"'{section}' section of {config_path} must be a JSON object")

        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    if not isinstance(config['contract']['constructor_args'], list):
        raise ValueError("contract.constructor_args must be a list")

    return config
