"""
Validation hook payload resolution.
"""
import logging
from typing import Optional, Tuple

from eth_utils import is_address

from agw_sdk.exceptions import CapabilityQueryError
from agw_sdk.models import HookPayloads

logger = logging.getLogger(__name__)


async def resolve_hook_payloads(
    account_contract,
    hook_payloads: Optional[HookPayloads] = None,
) -> Tuple[bytes, ...]:
    """
    Build the hook payload sequence for a delegated signature.

    The account's validation hooks are read once; each hook gets the
    caller's payload for its address, or empty bytes if none was given.

    Args:
        account_contract: Account contract exposing list_hooks()
        hook_payloads: Caller-supplied payloads keyed by hook address

    Returns:
        Payloads in the same order as the account's hook list

    Raises:
        CapabilityQueryError: If the hook list cannot be read or is malformed
    """
    payloads = hook_payloads if hook_payloads is not None else HookPayloads()

    try:
        hooks = await account_contract.list_hooks(True)
    except Exception as e:
        logger.error(f"Failed to read validation hooks: {e}")
        raise CapabilityQueryError(f"Failed to read validation hooks: {e}") from e

    if not isinstance(hooks, (list, tuple)):
        raise CapabilityQueryError(f"Malformed hook list: expected a sequence, got {type(hooks).__name__}")
    for hook in hooks:
        if not isinstance(hook, str) or not is_address(hook):
            raise CapabilityQueryError(f"Malformed hook list entry: {hook!r}")

    hook_data = tuple(payloads.payload_for(hook) for hook in hooks)
    missing = sum(1 for data in hook_data if not data)
    logger.debug(f"Resolved {len(hook_data)} validation hooks ({missing} without payload)")
    return hook_data
