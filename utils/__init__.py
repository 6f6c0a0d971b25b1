"""
Utilities Package
Network endpoint resolution
"""

from .rpc_manager import RPCManager

__all__ = ['RPCManager']
