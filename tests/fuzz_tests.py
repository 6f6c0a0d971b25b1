"""
Fuzz Testing for the deployer
Tests result reporting with arbitrary inputs
"""

import asyncio
from io import StringIO
from unittest.mock import Mock, AsyncMock
from hypothesis import given, strategies as st

from deployer.deployer import ContractDeployer

# Note: Requires hypothesis package
# pip install hypothesis


def make_toolchain(address):
    toolchain = Mock()
    pending = toolchain.get_contract_factory.return_value.deploy.return_value
    pending.wait_for_confirmation = AsyncMock(return_value=Mock(address=address))
    return toolchain


class TestResultLineFuzzing:
    """Fuzz test the success line"""

    @given(address_bytes=st.binary(min_size=20, max_size=20))
    def test_success_line_for_any_address(self, address_bytes):
        """Exactly one line, carrying the address verbatim"""
        address = "0x" + address_bytes.hex()
        stdout = StringIO()

        status = asyncio.run(ContractDeployer(make_toolchain(address), stdout=stdout).run())

        assert status == 0
        assert stdout.getvalue() == f"Project deployed to: {address}\n"

    @given(
        contract_name=st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,30}", fullmatch=True),
        constructor_args=st.lists(st.integers(min_value=0, max_value=2**256 - 1), max_size=5)
    )
    def test_name_and_args_forwarded(self, contract_name, constructor_args):
        """Contract name and constructor arguments reach the toolchain unchanged"""
        toolchain = make_toolchain("0xABC123")
        stdout = StringIO()

        asyncio.run(ContractDeployer(
            toolchain,
            contract_name=contract_name,
            constructor_args=constructor_args,
            stdout=stdout
        ).run())

        toolchain.get_contract_factory.assert_called_once_with(contract_name)
        toolchain.get_contract_factory.return_value.deploy.assert_called_once_with(*constructor_args)
        assert stdout.getvalue().startswith(f"{contract_name} deployed to: ")


class TestFailureFuzzing:
    """Fuzz test failure handling"""

    @given(message=st.text(max_size=200))
    def test_any_error_exits_with_one(self, message):
        """Error text (including braces) never breaks reporting"""
        toolchain = make_toolchain("0xABC123")
        toolchain.get_contract_factory.return_value.deploy.side_effect = RuntimeError(message)
        stdout = StringIO()

        status = asyncio.run(ContractDeployer(toolchain, stdout=stdout).run())

        assert status == 1
        assert stdout.getvalue() == ""
