"""
Local signer backed by an eth_account private key.
"""
import logging
from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount

from agw_sdk.models import TypedData

logger = logging.getLogger(__name__)


class LocalSigner:
    """
    Signer that keeps a secp256k1 private key in memory.

    Suitable for session keys generated by the application; owner keys
    are usually held by a wallet or a remote signer instead.
    """

    def __init__(self, private_key: Optional[str] = None, account: Optional[LocalAccount] = None):
        """
        Args:
            private_key: Hex-encoded private key
            account: Existing eth_account LocalAccount (alternative to private_key)

        Raises:
            ValueError: If neither private_key nor account is provided
        """
        if account is None and not private_key:
            raise ValueError("Either private_key or account must be provided")
        self._account = account or Account.from_key(private_key)

    @property
    def address(self) -> str:
        return self._account.address

    async def sign_typed_data(self, typed_data: TypedData) -> bytes:
        signed = self._account.sign_typed_data(full_message=typed_data.as_message())
        logger.debug(f"Signed typed data for chain {typed_data.chain_id} with {self.address}")
        return bytes(signed.signature)

    def __repr__(self) -> str:
        return f"LocalSigner(address={self.address})"
