from hypothesis import given, settings, strategies as st

from conftest import b64
from rsaverify import decode_signature, is_valid_public_key, verify

pem_like = st.one_of(
    st.text(max_size=200),
    st.text(max_size=200).map(lambda s: f"-----BEGIN PUBLIC KEY-----\n{s}\n-----END PUBLIC KEY-----"),
    st.binary(max_size=200),
)

signature_like = st.one_of(st.text(max_size=400), st.binary(max_size=400))
data_like = st.one_of(st.text(max_size=100), st.binary(max_size=100), st.none(), st.integers())
alg_like = st.one_of(st.none(), st.sampled_from(["SHA-256", "SHA-512", "SHA-1", "sha-512"]), st.text(max_size=8))


@given(data=data_like, signature=signature_like, key=pem_like, alg=alg_like)
def test_verify_never_raises_on_garbage(data, signature, key, alg):
    assert verify(data, signature, key, alg) is False


@given(pem=pem_like)
def test_is_valid_public_key_never_raises(pem):
    assert is_valid_public_key(pem) is False


@settings(max_examples=50, deadline=None)
@given(signature=signature_like)
def test_random_signature_rejected_for_real_key(pub_pem, signature):
    assert verify("hello world", signature, pub_pem) is False


@settings(max_examples=50, deadline=None)
@given(raw=st.binary(min_size=1, max_size=300))
def test_urlsafe_decoding_matches_standard(raw):
    import base64

    std = base64.b64encode(raw).decode()
    url = base64.urlsafe_b64encode(raw).decode().rstrip("=")
    assert decode_signature(std) == decode_signature(url) == raw


@settings(max_examples=20, deadline=None)
@given(message=st.binary(max_size=64))
def test_signed_messages_verify_under_both_encodings(sign, pub_pem, message):
    import base64

    raw = sign(message)
    assert verify(message, b64(raw), pub_pem) is True
    assert verify(message, base64.urlsafe_b64encode(raw).decode(), pub_pem) is True
