"""
Typed-data domain derivation.
"""
from agw_sdk.exceptions import MissingCapabilityError
from agw_sdk.models import TransactionRequest, TypedData


def require_domain_capability(chain) -> None:
    if not callable(getattr(chain, "derive_domain", None)):
        raise MissingCapabilityError("`derive_domain` not found on chain binding")


def build_domain(chain, tx: TransactionRequest, chain_id: int, from_address: str) -> TypedData:
    """
    Derive the typed-data domain for tx, bound to the live chain id.

    Not cached: the result embeds the chain id fetched for this call.
    """
    require_domain_capability(chain)
    return chain.derive_domain(tx, chain_id=chain_id, from_address=from_address)
