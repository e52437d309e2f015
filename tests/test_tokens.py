"""Tests for kyaa token classification."""

import pytest

from kyaa.tokens import Token, classify


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('--', Token(kind='stop', raw='--')),
        ('-', Token(kind='stdin', raw='-')),
        ('-h', Token(kind='help', raw='-h')),
        ('--help', Token(kind='help', raw='--help')),
        ('--var', Token(kind='long', raw='--var', name='var')),
        ('--var=1337', Token(kind='long', raw='--var=1337', name='var', inline_value='1337')),
        ('--log-file=', Token(kind='long', raw='--log-file=', name='log-file', inline_value='')),
        ('--a=b=c', Token(kind='long', raw='--a=b=c', name='a', inline_value='b=c')),
        ('-x', Token(kind='short', raw='-x', name='x')),
        ('-xv', Token(kind='short', raw='-xv', name='x')),
        ('file.txt', Token(kind='positional', raw='file.txt')),
        ('', Token(kind='positional', raw='')),
    ],
)
def test_classify(raw: str, expected: Token) -> None:
    assert classify(raw) == expected


def test_help_with_value_is_a_long_flag() -> None:
    token = classify('--help=yes')
    assert token.kind == 'long'
    assert token.name == 'help'


def test_clustered_short_token() -> None:
    assert classify('-xv').clustered
    assert not classify('-x').clustered
    assert not classify('--xv').clustered
