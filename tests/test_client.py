"""
Tests for SmartAccountClient.
"""
from unittest.mock import patch

import pytest
import rlp
from eth_utils import to_checksum_address

from agw_sdk import SmartAccountClient
from agw_sdk.chain import ZkSyncChainBinding
from agw_sdk.config import NetworkConfig, SigningConfig
from agw_sdk.exceptions import ChainMismatchError, InvalidChainError
from agw_sdk.models import CompositeSignature, SigningMode
from conftest import (
    ABSTRACT_MAINNET_ID,
    ABSTRACT_TESTNET_ID,
    HOOK_A,
    SMART_ACCOUNT,
    TEST_RPC_URL,
    TEST_TX,
    VALIDATOR,
    FakeAccountContract,
    FakeChainBinding,
    run,
)

def _client(signer, **kwargs):
    params = {
        "rpc_url": TEST_RPC_URL,
        "account_address": SMART_ACCOUNT,
        "signer": signer,
        "validator": VALIDATOR,
        "chain_id": ABSTRACT_MAINNET_ID,
    }
    params.update(kwargs)
    return SmartAccountClient(**params)


def test_init_wires_collaborators(signer):
    client = _client(signer)

    assert isinstance(client.chain, ZkSyncChainBinding)
    assert client.address == to_checksum_address(SMART_ACCOUNT)
    assert client.config.supported_chain_ids == frozenset({ABSTRACT_MAINNET_ID, ABSTRACT_TESTNET_ID})


@pytest.mark.parametrize("rpc_url, ok", [
    ("https://rpc.example.com", True),
    ("http://localhost:8545", True),
    ("http://127.0.0.1:8011", True),
    ("http://rpc.example.com", False),
])
def test_rpc_url_scheme(signer, rpc_url, ok):
    if ok:
        _client(signer, rpc_url=rpc_url)
    else:
        with pytest.raises(ValueError, match="must use https://"):
            _client(signer, rpc_url=rpc_url)


def test_signer_required():
    with pytest.raises(ValueError, match="signer must be provided"):
        _client(None)


def test_from_network(signer):
    client = SmartAccountClient.from_network(
        network="abstract-testnet",
        account_address=SMART_ACCOUNT,
        signer=signer,
        validator=VALIDATOR,
    )

    assert client.chain_id == ABSTRACT_TESTNET_ID
    assert client.rpc_url == NetworkConfig.get_rpc_url("abstract-testnet")


def test_from_network_rpc_override(signer):
    client = SmartAccountClient.from_network(
        network="abstract-mainnet",
        account_address=SMART_ACCOUNT,
        signer=signer,
        validator=VALIDATOR,
        rpc_url="https://override.example.com",
        config=SigningConfig.testnet_only(),
    )

    assert client.rpc_url == "https://override.example.com"
    with pytest.raises(InvalidChainError):
        run(client.sign_transaction(TEST_TX))


def test_from_network_unknown(signer):
    with pytest.raises(ValueError, match="Unknown network"):
        SmartAccountClient.from_network("nope", SMART_ACCOUNT, signer, VALIDATOR)


def test_sign_transaction(signer):
    client = _client(signer)
    client.chain = FakeChainBinding(live_chain_id=ABSTRACT_MAINNET_ID)
    client.account_contract = FakeAccountContract(hooks=[HOOK_A])

    raw = run(client.sign_transaction(TEST_TX, hook_payloads={HOOK_A: "0xaa"}))

    fields = rlp.decode(raw[1:])
    composite = CompositeSignature.decode(fields[14])
    assert composite.hook_data == (b"\xaa",)
    assert fields[11] == bytes.fromhex(SMART_ACCOUNT[2:])


def test_sign_transaction_direct(signer):
    client = _client(signer)
    client.chain = FakeChainBinding(live_chain_id=ABSTRACT_MAINNET_ID)
    client.account_contract = FakeAccountContract(hooks=[HOOK_A])

    raw = run(client.sign_transaction(TEST_TX, mode=SigningMode.DIRECT))

    assert len(rlp.decode(raw[1:])[14]) == 65
    assert client.account_contract.calls == []


def test_sign_transaction_wrong_network(signer):
    client = _client(signer)
    client.chain = FakeChainBinding(live_chain_id=ABSTRACT_TESTNET_ID)
    client.account_contract = FakeAccountContract()

    with pytest.raises(ChainMismatchError):
        run(client.sign_transaction(TEST_TX))
    assert signer.signed == []


def test_account_override_reads_hooks_of_that_account(signer):
    other = "0x7777777777777777777777777777777777777777"
    client = _client(signer)
    client.chain = FakeChainBinding(live_chain_id=ABSTRACT_MAINNET_ID)
    client.account_contract = FakeAccountContract(hooks=[HOOK_A], address=to_checksum_address(SMART_ACCOUNT))
    override_contract = FakeAccountContract(hooks=[], address=other)

    with patch("agw_sdk.client.AccountContract", return_value=override_contract) as mock_contract:
        raw = run(client.sign_transaction({**TEST_TX, "account": other}, hook_payloads={HOOK_A: "0xaa"}))

    mock_contract.assert_called_once_with(client.w3, to_checksum_address(other))
    assert client.account_contract.calls == []
    assert override_contract.calls == [True]
    assert CompositeSignature.decode(rlp.decode(raw[1:])[14]).hook_data == ()
