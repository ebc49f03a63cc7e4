"""
Signing pipeline for AGW smart accounts.
"""
from agw_sdk.signing.composer import compose_signature
from agw_sdk.signing.domain import build_domain
from agw_sdk.signing.hooks import resolve_hook_payloads
from agw_sdk.signing.pipeline import sign_transaction
from agw_sdk.signing.serializer import serialize_signed_transaction
from agw_sdk.signing.signature import sign_domain
from agw_sdk.signing.validation import validate_chain

__all__ = [
    "validate_chain",
    "build_domain",
    "sign_domain",
    "resolve_hook_payloads",
    "compose_signature",
    "serialize_signed_transaction",
    "sign_transaction",
]
