#!/usr/bin/env python3
"""
Example of signing a transfer with a session key for an AGW smart account.
"""
import asyncio
import logging
import os

from agw_sdk import (
    LocalSigner,
    NetworkConfig,
    SigningMode,
    SmartAccountClient,
)


async def main():
    """
    Demonstrate signing with a session key.

    This example shows how to:
    1. Initialize the client from a network configuration
    2. Sign a transfer as a delegated session key, with hook payloads
    3. Sign the same transfer directly as the signer
    """
    SESSION_KEY = os.environ.get("SESSION_KEY")
    ACCOUNT = os.environ.get("AGW_ACCOUNT")
    VALIDATOR = os.environ.get("SESSION_VALIDATOR")
    NETWORK = os.environ.get("AGW_NETWORK", "abstract-testnet")

    if not (SESSION_KEY and ACCOUNT and VALIDATOR):
        print("ERROR: SESSION_KEY, AGW_ACCOUNT and SESSION_VALIDATOR environment variables are required")
        return

    print("Available networks:")
    for network_name in NetworkConfig.load_networks().keys():
        print(f"  - {network_name}")
    print()

    signer = LocalSigner(SESSION_KEY)
    client = SmartAccountClient.from_network(
        network=NETWORK,
        account_address=ACCOUNT,
        signer=signer,
        validator=VALIDATOR,
    )
    print(f"Smart account: {client.address}")
    print(f"Session signer: {signer.address}")

    transfer = {
        "to": "0x000000000000000000000000000000000000dEaD",
        "value": 10**12,
        "nonce": int(os.environ.get("AGW_NONCE", "0")),
        "gas": 500000,
        "maxFeePerGas": 25000000,
        "maxPriorityFeePerGas": 0,
    }

    # Hooks without an entry here receive empty payloads
    hook_payloads = {}
    if os.environ.get("HOOK_ADDRESS"):
        hook_payloads[os.environ["HOOK_ADDRESS"]] = os.environ.get("HOOK_PAYLOAD", "0x")

    raw_tx = await client.sign_transaction(transfer, hook_payloads=hook_payloads)
    print(f"Delegated transaction ({len(raw_tx)} bytes): 0x{raw_tx.hex()}")

    raw_direct = await client.sign_transaction(transfer, mode=SigningMode.DIRECT)
    print(f"Direct transaction ({len(raw_direct)} bytes): 0x{raw_direct.hex()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
