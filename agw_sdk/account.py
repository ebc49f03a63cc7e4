"""
Read-only access to the AGW smart account contract.
"""
import logging
from typing import List

from web3 import AsyncWeb3

logger = logging.getLogger(__name__)


class AccountContract:
    """
    Thin wrapper over the AGW account contract's hook registry.
    """

    # Subset of the AGW account ABI used by the signing pipeline
    AGW_ACCOUNT_ABI = [
        {
            "inputs": [
                {"internalType": "bool", "name": "isValidation", "type": "bool"}
            ],
            "name": "listHooks",
            "outputs": [
                {"internalType": "address[]", "name": "hookList", "type": "address[]"}
            ],
            "stateMutability": "view",
            "type": "function"
        }
    ]

    def __init__(self, w3: AsyncWeb3, address: str):
        """
        Args:
            w3: AsyncWeb3 instance connected to the account's network
            address: Smart account address
        """
        self.address = AsyncWeb3.to_checksum_address(address)
        self.contract = w3.eth.contract(address=self.address, abi=self.AGW_ACCOUNT_ABI)

    async def list_hooks(self, validation: bool = True) -> List[str]:
        """
        Read the account's installed hooks in registry order.

        Args:
            validation: True for validation hooks, False for execution hooks

        Returns:
            Hook addresses as returned by the contract
        """
        hooks = await self.contract.functions.listHooks(validation).call()
        logger.debug(f"Account {self.address} reports {len(hooks)} hooks (validation={validation})")
        return hooks
