# tests/conftest.py
"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- Temporary gadget file paths and stores
- A static known-identifier oracle
- Building token lists without a lexer
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from gadgetbox.core.analysis.oracle import StaticIdentifierOracle
from gadgetbox.core.analysis.tokens import Token, TokenKind
from gadgetbox.core.gadgets.repository import GadgetStore


@pytest.fixture
def gadgets_file(tmp_path: Path) -> Path:
    """Path to a gadget file that does not exist yet.

    Returns:
        Path inside a per-test temporary directory.
    """
    return tmp_path / "GadgetBox" / "user_scripts.json"


@pytest.fixture
def store(gadgets_file: Path) -> GadgetStore:
    """Empty gadget store backed by ``gadgets_file``."""
    return GadgetStore(gadgets_file)


@pytest.fixture
def oracle() -> StaticIdentifierOracle:
    """Oracle that knows a handful of PowerShell commands."""
    return StaticIdentifierOracle(["Get-Content", "Write-Output", "ls", "cd"])


@pytest.fixture
def build_tokens() -> Callable[..., list[Token]]:
    """Build tokens from (kind, text) pairs with positions filled in.

    Returns:
        Function taking (TokenKind, str) tuples and returning Tokens.
    """

    def _build(*pairs: tuple[TokenKind, str]) -> list[Token]:
        tokens = []
        offset = 0
        for kind, text in pairs:
            tokens.append(Token(kind, text, offset))
            offset += len(text)
        return tokens

    return _build
