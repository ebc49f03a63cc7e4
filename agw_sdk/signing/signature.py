"""
Typed-data signing by the authorized signer.
"""
import logging

from agw_sdk.exceptions import SignerError
from agw_sdk.models import SIGNATURE_LENGTH, TypedData

logger = logging.getLogger(__name__)


async def sign_domain(signer, typed_data: TypedData) -> bytes:
    """
    Ask the authorized signer to sign typed_data.

    Raises:
        SignerError: If the signer fails or returns a malformed signature
    """
    try:
        signature = await signer.sign_typed_data(typed_data)
    except Exception as e:
        logger.error(f"Typed data signing failed: {e}")
        raise SignerError(f"Failed to sign typed data: {e}") from e

    if not isinstance(signature, (bytes, bytearray)) or len(signature) != SIGNATURE_LENGTH:
        raise SignerError(
            f"Signer must return a {SIGNATURE_LENGTH}-byte signature, got {signature!r:.80}"
        )
    return bytes(signature)
