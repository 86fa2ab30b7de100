"""Assertion utilities: ContractError, safe_assert and assert_result."""

from driftless.assertions.safe import ContractError, assert_result, safe_assert

__all__ = [
    'ContractError',
    'assert_result',
    'safe_assert',
]
