"""Transaction contracts for non-custodial operations.

These contracts define unsigned transactions that clients sign locally.
NO signing or broadcasting happens server-side.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UnsignedTransaction(BaseModel):
    """An unsigned transaction for client-side signing.

    The client is responsible for:
    1. Signing this transaction with their private key
    2. Broadcasting the signed transaction to the network
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chain_id: int = Field(..., description="EVM chain ID")
    to: str = Field(..., description="Destination address (contract or recipient)")
    value: str = Field(default="0", description="Value in base units (decimal string)")
    data: Optional[str] = Field(None, description="Transaction data (hex encoded)")
    gas_price: Optional[str] = Field(None, description="Gas price in wei (decimal string)")
    gas_limit: Optional[str] = Field(None, description="Gas limit (decimal string)")
