"""
Property-based tests for the AGW SDK.

These tests verify that properties hold true across many random inputs.
"""
from hypothesis import given, settings, strategies as st

from agw_sdk.models import CompositeSignature, HookPayloads, SigningMode
from agw_sdk.signing import compose_signature, resolve_hook_payloads
from conftest import VALIDATOR, FakeAccountContract, run

address_strategy = st.binary(min_size=20, max_size=20).map(lambda b: "0x" + b.hex())
payload_strategy = st.binary(max_size=96)
signature_strategy = st.binary(min_size=65, max_size=65)


@settings(max_examples=50)
@given(
    hooks=st.lists(address_strategy, max_size=8, unique=True),
    payload_map=st.dictionaries(address_strategy, payload_strategy, max_size=8),
)
def test_hook_payloads_parallel_to_hook_list(hooks, payload_map):
    contract = FakeAccountContract(hooks=hooks)

    result = run(resolve_hook_payloads(contract, HookPayloads(payload_map)))

    assert len(result) == len(hooks)
    for hook, payload in zip(hooks, result):
        assert payload == payload_map.get(hook, b"")


@settings(max_examples=50)
@given(
    signature=signature_strategy,
    hook_data=st.lists(payload_strategy, max_size=6),
)
def test_delegated_signature_decodes_to_inputs(signature, hook_data):
    encoded = compose_signature(SigningMode.DELEGATED, signature, VALIDATOR, hook_data)

    decoded = CompositeSignature.decode(encoded)

    assert decoded.signature == signature
    assert decoded.validator.lower() == VALIDATOR
    assert decoded.hook_data == tuple(hook_data)
    # ABI encoding is word aligned
    assert len(encoded) % 32 == 0


@settings(max_examples=25)
@given(signature=signature_strategy, hook_data=st.lists(payload_strategy, max_size=3))
def test_direct_signature_is_raw(signature, hook_data):
    assert compose_signature(SigningMode.DIRECT, signature, VALIDATOR, hook_data) == signature
