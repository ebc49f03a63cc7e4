"""
Signer interface for the AGW SDK.

A signer holds the private key material of an authorized party (the
account owner or a session key). The smart account itself has no key.
"""
from typing import Protocol, runtime_checkable

from agw_sdk.models import TypedData
from agw_sdk.signer.local import LocalSigner


@runtime_checkable
class Signer(Protocol):
    """Protocol for signers that can produce EIP-712 signatures"""
    address: str

    async def sign_typed_data(self, typed_data: TypedData) -> bytes:
        """Sign typed data and return the 65-byte signature"""
        ...


__all__ = ["Signer", "LocalSigner"]
