import hashlib
import hmac

import pytest

from ftxapi.signer import sign


@pytest.mark.parametrize(
    "secret, payload, expected",
    [
        # RFC 4231, test case 2
        (
            "Jefe",
            "what do ya want for nothing?",
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843",
        ),
        (
            "key",
            "The quick brown fox jumps over the lazy dog",
            "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8",
        ),
        (
            "",
            "",
            "b613679a0814d9ec772f95d778c35fc5ff1697c493715653c6c712144292c5ad",
        ),
    ],
)
def test_sign_matches_known_vectors(secret, payload, expected):
    assert sign(secret, payload) == expected


def test_sign_matches_independent_hmac():
    secret = "T4lPid48QtjNxjLUFOcUZghD7CUJ7sTVsfuvQZF2"
    payload = "1588591511721GET/api/markets"
    expected = hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()
    assert sign(secret, payload) == expected


def test_sign_accepts_bytes_and_str_alike():
    assert sign("s", b"1POST/orders{}") == sign("s", "1POST/orders{}")


def test_signature_is_lowercase_hex():
    signature = sign("secret", "payload")
    assert len(signature) == 64
    assert signature == signature.lower()
    int(signature, 16)


def test_different_secrets_give_different_signatures():
    assert sign("a", "payload") != sign("b", "payload")
