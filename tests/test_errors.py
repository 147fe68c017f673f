"""Tests for UnwrapError."""

import pytest

from okerr import Err, Ok, UnwrapError
from okerr.errors import UNWRAP_ERR_ON_OK, UNWRAP_ON_ERR


def test_messages():
    assert UNWRAP_ON_ERR == 'Called unwrap on an Err value'
    assert UNWRAP_ERR_ON_OK == 'Called unwrap_err on an Ok value'


def test_str_is_message_only():
    err = UnwrapError('custom', value={'detail': 1})
    assert str(err) == 'custom'
    assert err.args == ('custom',)
    assert err.value == {'detail': 1}


def test_value_defaults_to_none():
    assert UnwrapError('x').value is None


@pytest.mark.parametrize(
    ('call', 'message'),
    [
        (lambda: Err(ValueError('inner')).unwrap(), UNWRAP_ON_ERR),
        (lambda: Ok(1).unwrap_err(), UNWRAP_ERR_ON_OK),
        (lambda: Err('x').expect('while loading config'), 'while loading config'),
    ],
)
def test_wrong_variant_raises(call, message):
    with pytest.raises(UnwrapError) as exc_info:
        call()
    assert str(exc_info.value) == message


def test_expect_keeps_message_verbatim():
    """expect() does not append the error payload to the message."""
    with pytest.raises(UnwrapError) as exc_info:
        Err('payload').expect('Expected error')
    assert 'payload' not in str(exc_info.value)
    assert exc_info.value.value == 'payload'
