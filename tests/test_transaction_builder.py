"""Tests for unsigned transaction building."""

import pytest

from conftest import SPENDER, USDC
from veloraswap.errors import BuildTxFailedError
from veloraswap.web.services.transaction_builder import (
    MAX_UINT256,
    TransactionBuilder,
    encode_approve,
    to_decimal_string,
)


class TestEncodeApprove:
    """Tests for ERC-20 approve calldata."""

    def test_layout(self):
        data = encode_approve(SPENDER, 1_000_000)

        assert data.startswith("0x095ea7b3")
        assert len(data) == 2 + 8 + 64 + 64
        assert data[10:74] == "0" * 24 + SPENDER[2:].lower()
        assert int(data[74:], 16) == 1_000_000

    def test_max_amount(self):
        assert encode_approve(SPENDER, MAX_UINT256).endswith("f" * 64)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            encode_approve(SPENDER, MAX_UINT256 + 1)
        with pytest.raises(ValueError):
            encode_approve(SPENDER, -1)


class TestToDecimalString:
    """Tests for quantity coercion."""

    def test_hex(self):
        assert to_decimal_string("0x3b9aca00") == "1000000000"
        assert to_decimal_string("0X10") == "16"

    def test_decimal(self):
        assert to_decimal_string("210000") == "210000"
        assert to_decimal_string(21000) == "21000"

    def test_missing(self):
        assert to_decimal_string(None) is None
        assert to_decimal_string("") is None


class TestTransactionBuilder:
    """Tests for TransactionBuilder."""

    def test_build_approval(self):
        tx = TransactionBuilder().build_approval(
            chain_id=1,
            token_address=USDC,
            spender=SPENDER,
            amount=1_000_000,
        )

        assert tx.chain_id == 1
        assert tx.to == USDC
        assert tx.value == "0"
        assert tx.data == encode_approve(SPENDER, 1_000_000)
        assert tx.gas_limit is None

    def test_build_swap(self):
        tx = TransactionBuilder().build_swap(
            137,
            {"to": SPENDER, "data": "0xabc", "value": "5", "gasPrice": "0x1", "gas": "0x5208"},
        )

        assert tx.chain_id == 137
        assert tx.value == "5"
        assert tx.gas_price == "1"
        assert tx.gas_limit == "21000"

    def test_build_swap_defaults(self):
        tx = TransactionBuilder().build_swap(1, {"to": SPENDER, "data": "0xabc"})

        assert tx.value == "0"
        assert tx.gas_price is None
        assert tx.gas_limit is None

    @pytest.mark.parametrize("params", [None, {}, {"to": SPENDER}, {"data": "0xabc"}])
    def test_build_swap_incomplete(self, params):
        with pytest.raises(BuildTxFailedError):
            TransactionBuilder().build_swap(1, params)

    @pytest.mark.parametrize("gas_fields", [{"gasPrice": "1.5e9"}, {"gas": "lots"}])
    def test_build_swap_malformed_gas(self, gas_fields):
        with pytest.raises(BuildTxFailedError, match="Malformed gas fields"):
            TransactionBuilder().build_swap(1, {"to": SPENDER, "data": "0xabc", **gas_fields})

    def test_wire_format_is_camel_case(self):
        tx = TransactionBuilder().build_swap(1, {"to": SPENDER, "data": "0xabc", "gas": "1"})
        wire = tx.model_dump(by_alias=True, exclude_none=True)

        assert wire == {"chainId": 1, "to": SPENDER, "value": "0", "data": "0xabc", "gasLimit": "1"}
