"""
Composite signature encoding.
"""
from typing import Sequence

from eth_utils import is_address, to_checksum_address

from agw_sdk.exceptions import EncodingError
from agw_sdk.models import ADDRESS_LENGTH, SIGNATURE_LENGTH, CompositeSignature, SigningMode


def _normalize_validator(validator) -> str:
    if isinstance(validator, (bytes, bytearray)):
        if len(validator) != ADDRESS_LENGTH:
            raise EncodingError(
                f"Validator address must be {ADDRESS_LENGTH} bytes, got {len(validator)}"
            )
        return to_checksum_address(bytes(validator))
    if isinstance(validator, str) and is_address(validator):
        return to_checksum_address(validator)
    raise EncodingError(f"Invalid validator address: {validator!r}")


def compose_signature(
    mode: SigningMode,
    raw_signature: bytes,
    validator,
    hook_data: Sequence[bytes] = (),
) -> bytes:
    """
    Produce the signature bytes the smart account expects.

    DIRECT returns raw_signature unchanged. DELEGATED returns the ABI
    encoding of (raw_signature, validator, hook_data).

    Raises:
        EncodingError: On a malformed signature, validator or payload
    """
    if not isinstance(raw_signature, (bytes, bytearray)) or len(raw_signature) != SIGNATURE_LENGTH:
        raise EncodingError(f"Raw signature must be {SIGNATURE_LENGTH} bytes")

    if mode is SigningMode.DIRECT:
        return bytes(raw_signature)

    for index, payload in enumerate(hook_data):
        if not isinstance(payload, (bytes, bytearray)):
            raise EncodingError(
                f"Hook payload at index {index} must be bytes, got {type(payload).__name__}"
            )

    composite = CompositeSignature(
        signature=bytes(raw_signature),
        validator=_normalize_validator(validator),
        hook_data=tuple(bytes(payload) for payload in hook_data),
    )
    return composite.encode()
