"""
Chain binding validation.
"""
import logging
from typing import AbstractSet, Optional

from agw_sdk.exceptions import ChainMismatchError, InvalidChainError, NetworkError

logger = logging.getLogger(__name__)


async def validate_chain(
    declared_chain_id: Optional[int],
    supported_chain_ids: AbstractSet[int],
    chain,
) -> int:
    """
    Check the declared chain against the allow-list and the live network.

    Args:
        declared_chain_id: Chain the caller intends to sign for
        supported_chain_ids: Allow-list of chain ids
        chain: Chain binding used for the live chain id read

    Returns:
        The live chain id, to be used for the rest of the call

    Raises:
        InvalidChainError: If no chain is declared or it is not supported
        NetworkError: If the live chain id cannot be read
        ChainMismatchError: If the live chain id differs from the declared one
    """
    if declared_chain_id is None:
        raise InvalidChainError("No chain specified")
    if declared_chain_id not in supported_chain_ids:
        raise InvalidChainError(f"Invalid chain specified: {declared_chain_id}")

    try:
        live_chain_id = await chain.fetch_live_chain_id()
    except Exception as e:
        logger.error(f"Failed to fetch live chain ID: {e}")
        raise NetworkError(f"Failed to fetch live chain ID: {e}") from e

    if live_chain_id != declared_chain_id:
        raise ChainMismatchError(expected=declared_chain_id, actual=live_chain_id)

    logger.debug(f"Live chain ID {live_chain_id} matches declared chain")
    return live_chain_id
