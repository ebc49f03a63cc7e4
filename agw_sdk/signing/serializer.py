"""
Signed transaction serialization.
"""
from agw_sdk.exceptions import SerializationCapabilityMissingError
from agw_sdk.models import ZERO_SIGNATURE, TransactionRequest


def require_serializer_capability(chain) -> None:
    if not callable(getattr(chain, "serialize_transaction", None)):
        raise SerializationCapabilityMissingError("transaction serializer not found on chain binding")


def serialize_signed_transaction(
    chain,
    tx: TransactionRequest,
    chain_id: int,
    from_address: str,
    custom_signature: bytes,
) -> bytes:
    """
    Serialize tx with the composed signature in its custom signature field.

    The ECDSA r/s/v fields are zero placeholders.
    """
    require_serializer_capability(chain)
    return chain.serialize_transaction(
        tx,
        chain_id=chain_id,
        from_address=from_address,
        custom_signature=custom_signature,
        signature=ZERO_SIGNATURE,
    )
