"""Transaction builder for preparing unsigned transactions.

This service builds unsigned transactions for client-side signing.
NO signing or broadcasting happens here - this is non-custodial.
"""

import logging
from typing import Any, Optional, Union

from veloraswap.errors import BuildTxFailedError
from veloraswap.utils.units import MAX_UINT256
from veloraswap.web.contracts.transactions import UnsignedTransaction

logger = logging.getLogger(__name__)


# ERC-20 ABI fragment
ERC20_APPROVE_SELECTOR = "0x095ea7b3"  # approve(address,uint256)


def to_decimal_string(value: Union[str, int, None]) -> Optional[str]:
    """Coerce a hex or decimal quantity to a decimal string.

    Returns None for missing values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return str(value)

    text = str(value).strip()
    if text.lower().startswith("0x"):
        return str(int(text, 16))
    return str(int(text))


def encode_approve(spender: str, amount: int) -> str:
    """Encode calldata for ERC-20 approve(spender, amount)."""
    if not 0 <= amount <= MAX_UINT256:
        raise ValueError(f"Approval amount out of uint256 range: {amount}")

    spender_padded = spender.lower().replace("0x", "").zfill(64)
    amount_hex = hex(amount)[2:].zfill(64)
    return f"{ERC20_APPROVE_SELECTOR}{spender_padded}{amount_hex}"


class TransactionBuilder:
    """Builds unsigned transactions for client-side signing.

    This service NEVER:
    - Accesses private keys
    - Signs transactions
    - Broadcasts transactions

    It ONLY prepares transaction data for the client to sign locally.
    """

    def build_approval(
        self,
        chain_id: int,
        token_address: str,
        spender: str,
        amount: int,
    ) -> UnsignedTransaction:
        """Build an ERC-20 approval transaction.

        Args:
            chain_id: EVM chain id
            token_address: Token contract address
            spender: Address to approve (the aggregator's spender contract)
            amount: Exact amount to approve, in base units

        Returns:
            UnsignedTransaction for client to sign
        """
        logger.debug(f"Building approval of {amount} on {token_address} for {spender[:10]}...")
        return UnsignedTransaction(
            chain_id=chain_id,
            to=token_address,
            value="0",
            data=encode_approve(spender, amount),
        )

    def build_swap(
        self,
        chain_id: int,
        tx_params: Optional[dict[str, Any]],
    ) -> UnsignedTransaction:
        """Build the swap transaction from aggregator transaction params.

        Args:
            chain_id: EVM chain id
            tx_params: Aggregator response with to, data, value, gasPrice, gas

        Returns:
            UnsignedTransaction for client to sign

        Raises:
            BuildTxFailedError: If the params lack a destination or calldata,
            or carry gas fields that are not integers
        """
        if not tx_params or not tx_params.get("to") or not tx_params.get("data"):
            raise BuildTxFailedError("Failed to build swap transaction from Velora")

        try:
            gas_price = to_decimal_string(tx_params.get("gasPrice"))
            gas_limit = to_decimal_string(tx_params.get("gas"))
        except ValueError as e:
            raise BuildTxFailedError(f"Malformed gas fields from Velora: {e}") from e

        value = tx_params.get("value")
        return UnsignedTransaction(
            chain_id=chain_id,
            to=tx_params["to"],
            data=tx_params["data"],
            value=str(value) if value not in (None, "") else "0",
            gas_price=gas_price,
            gas_limit=gas_limit,
        )
