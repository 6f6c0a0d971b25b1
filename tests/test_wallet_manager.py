"""
Unit Tests for the deployer wallet
"""

import pytest
from unittest.mock import Mock

from deployer.wallet_manager import WalletManager

# Hardhat default account #0
HARDHAT_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv('DEPLOYER_PRIVATE_KEY', raising=False)


@pytest.fixture
def w3():
    """Mock Web3 instance"""
    w3 = Mock()
    w3.eth.accounts = []
    return w3


class TestWalletManager:
    """Test deployer account selection and signing"""

    def test_key_from_environment(self, w3, monkeypatch):
        monkeypatch.setenv('DEPLOYER_PRIVATE_KEY', HARDHAT_KEY)

        wallet = WalletManager(w3)

        assert wallet.deployer_address == HARDHAT_ADDRESS
        assert wallet.can_sign

    def test_explicit_key(self, w3):
        wallet = WalletManager(w3, private_key=HARDHAT_KEY)

        assert wallet.deployer_address == HARDHAT_ADDRESS

    def test_sign_transaction(self, w3):
        wallet = WalletManager(w3, private_key=HARDHAT_KEY)

        signed = wallet.sign_transaction({
            'to': HARDHAT_ADDRESS,
            'value': 0,
            'gas': 21000,
            'gasPrice': 10**9,
            'nonce': 0,
            'chainId': 31337
        })

        assert len(signed.raw_transaction) > 0

    def test_node_account_fallback(self, w3):
        w3.eth.accounts = ["0x70997970C51812dc3A010C7d01b50e0d17dc79C8"]

        wallet = WalletManager(w3)

        assert wallet.deployer_address == "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
        assert not wallet.can_sign

        with pytest.raises(ValueError):
            wallet.sign_transaction({})

    def test_no_key_and_no_node_account(self, w3):
        with pytest.raises(ValueError, match="DEPLOYER_PRIVATE_KEY"):
            WalletManager(w3)

    def test_get_balance(self, w3):
        w3.eth.get_balance.return_value = 2 * 10**18
        w3.from_wei.side_effect = lambda value, unit: value / 10**18

        wallet = WalletManager(w3, private_key=HARDHAT_KEY)

        assert wallet.get_balance() == 2
        w3.eth.get_balance.assert_called_once_with(HARDHAT_ADDRESS)
