"""
Chain bindings for the AGW SDK.

A chain binding supplies the network-specific pieces of the signing
pipeline: the live chain id, typed-data domain derivation and
transaction serialization.
"""
from typing import Protocol, runtime_checkable

from agw_sdk.models import EcdsaSignature, TransactionRequest, TypedData
from agw_sdk.chain.zksync import ZkSyncChainBinding


@runtime_checkable
class ChainBinding(Protocol):
    """Protocol for network capabilities consumed by the signing pipeline"""

    async def fetch_live_chain_id(self) -> int:
        ...

    def derive_domain(self, tx: TransactionRequest, *, chain_id: int, from_address: str) -> TypedData:
        ...

    def serialize_transaction(
        self,
        tx: TransactionRequest,
        *,
        chain_id: int,
        from_address: str,
        custom_signature: bytes,
        signature: EcdsaSignature,
    ) -> bytes:
        ...


__all__ = ["ChainBinding", "ZkSyncChainBinding"]
