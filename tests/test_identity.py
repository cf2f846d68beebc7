"""Tests for opaque identity tokens."""
import copy

import pytest

from enumkit.core.identity import IdentityToken, new_token


def test_tokens_are_unique():
    first, second = new_token(), new_token()
    assert first != second
    assert first == first
    assert second.serial > first.serial


def test_tokens_survive_copy():
    token = new_token()
    assert copy.copy(token) is token
    assert copy.deepcopy(token) is token


def test_tokens_are_immutable():
    token = IdentityToken()
    with pytest.raises(AttributeError):
        token._serial = 0
    with pytest.raises(AttributeError):
        del token._serial


def test_tokens_hash_and_repr():
    token = new_token()
    assert {token: 1}[token] == 1
    assert repr(token) == f"<IdentityToken #{token.serial}>"
