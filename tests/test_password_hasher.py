import string

import pytest

from fastchat.password_hasher import PasswordHasher, Sha512PasswordHasher

EXPECTED_DIGEST = (
    "b109f3bbbc244eb82441917ed06d618b9008dd09b3befd1b5e07394c706a8bb9"
    "80b1d7785e5976ec049b46df5f1326af5a2ea6d103fd07c95385ffab0cacbc86"
)


@pytest.fixture
def hasher():
    return Sha512PasswordHasher()


def test_known_digest(hasher):
    assert hasher.hash("abc") == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )


def test_digest_is_lowercase_hex_of_fixed_length(hasher):
    digest = hasher.hash("password")
    assert len(digest) == 128
    assert set(digest) <= set(string.hexdigits.lower())


def test_hash_is_deterministic(hasher):
    assert hasher.hash("password") == EXPECTED_DIGEST
    assert Sha512PasswordHasher().hash("password") == EXPECTED_DIGEST


def test_different_passwords_differ(hasher):
    assert hasher.hash("password") != hasher.hash("secret")


def test_verify_round_trip(hasher):
    stored = hasher.hash("password")
    assert hasher.verify(stored, "password") is True
    assert hasher.verify(stored, "secret") is False


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        PasswordHasher()  # type: ignore[abstract]