"""
End-to-end signing pipeline for AGW smart account transactions.
"""
import logging
from typing import Any, Mapping, Optional, Union

from agw_sdk.config import SigningConfig
from agw_sdk.exceptions import MissingAccountError
from agw_sdk.models import HookPayloads, SigningMode, TransactionRequest
from agw_sdk.signing.composer import compose_signature
from agw_sdk.signing.domain import build_domain, require_domain_capability
from agw_sdk.signing.hooks import resolve_hook_payloads
from agw_sdk.signing.serializer import require_serializer_capability, serialize_signed_transaction
from agw_sdk.signing.signature import sign_domain
from agw_sdk.signing.validation import validate_chain

logger = logging.getLogger(__name__)


async def sign_transaction(
    request: Union[TransactionRequest, Mapping[str, Any]],
    *,
    signer,
    chain,
    account_contract,
    validator,
    config: SigningConfig,
    account_address: Optional[str] = None,
    chain_id: Optional[int] = None,
    mode: SigningMode = SigningMode.DELEGATED,
    hook_payloads: Optional[Union[HookPayloads, Mapping[str, Any]]] = None,
) -> bytes:
    """
    Sign a transaction on behalf of a smart account.

    Steps run strictly in order: validate chain, build domain, sign,
    resolve hooks (delegated mode), compose, serialize. The first error
    aborts the call.

    Args:
        request: Transaction request (normalized once here)
        signer: Authorized signer (owner or session key)
        chain: Chain binding for the target network
        account_contract: Smart account contract used for the hook registry
        validator: Address of the validation module for delegated signatures
        config: Allow-list and hook settings
        account_address: Smart account address, unless the request overrides it
        chain_id: Declared chain id, unless the request specifies one
        mode: SigningMode.DIRECT to sign as the signer itself
        hook_payloads: Payloads for the account's validation hooks

    Returns:
        Serialized signed transaction bytes

    Raises:
        AgwError: Any pipeline failure, see agw_sdk.exceptions
    """
    tx = TransactionRequest.normalize(request)
    mode = SigningMode.parse(mode)
    if hook_payloads is not None and not isinstance(hook_payloads, HookPayloads):
        hook_payloads = HookPayloads(hook_payloads)

    smart_account = tx.account or account_address
    if not smart_account:
        raise MissingAccountError("Could not find an account to sign with")
    from_address = signer.address if mode is SigningMode.DIRECT else smart_account

    require_domain_capability(chain)
    require_serializer_capability(chain)

    declared_chain_id = tx.chain_id if tx.chain_id is not None else chain_id
    live_chain_id = await validate_chain(declared_chain_id, config.supported_chain_ids, chain)

    typed_data = build_domain(chain, tx, live_chain_id, from_address)
    raw_signature = await sign_domain(signer, typed_data)

    hook_data = ()
    if mode is SigningMode.DELEGATED and config.resolve_hooks:
        hook_data = await resolve_hook_payloads(account_contract, hook_payloads)

    signature = compose_signature(mode, raw_signature, validator, hook_data)
    raw_tx = serialize_signed_transaction(chain, tx, live_chain_id, from_address, signature)

    logger.info(f"Signed {mode.value} transaction from {from_address} on chain {live_chain_id}")
    return raw_tx
