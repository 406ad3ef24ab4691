# gadgetbox/core/analysis/lexer.py
"""Pygments-backed tokenizer.

Translates Pygments token types into ``TokenKind`` so the classifier stays
independent of the lexer library. Offsets come straight from
``get_tokens_unprocessed`` and therefore match the original command.
"""

import logging
import re
from collections.abc import Iterable

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    _TokenType,
)
from pygments.util import ClassNotFound

from gadgetbox.core.analysis.tokens import Token, TokenKind
from gadgetbox.core.errors import TokenizeError

logger = logging.getLogger(__name__)

# Whole identifier/punctuation runs that spell a number, e.g. "5", "3.5",
# "-1", "0x1F", "10MB". The PowerShell lexer emits these as plain names.
_NUMERIC_RUN_RE = re.compile(
    r"[+-]?(?:0x[0-9a-f]+|\d+(?:\.\d+)?(?:e[+-]?\d+)?(?:kb|mb|gb|tb|pb)?)",
    re.IGNORECASE,
)

_RUN_KINDS = (TokenKind.IDENTIFIER, TokenKind.PUNCTUATION)


def map_token_type(ttype: _TokenType, text: str) -> TokenKind:
    """Map a Pygments token type onto a ``TokenKind``.

    Args:
        ttype: Pygments token type.
        text: Token text, used to tell whitespace from other plain text.

    Returns:
        The corresponding ``TokenKind``.
    """
    if ttype in String.Doc or ttype in Comment:
        return TokenKind.COMMENT
    if ttype in String:
        return TokenKind.STRING
    if ttype in Number:
        return TokenKind.NUMBER
    if ttype in Name.Variable:
        return TokenKind.VARIABLE
    if ttype in Name.Builtin or ttype in Name.Constant or ttype in Keyword:
        return TokenKind.KEYWORD
    if ttype in Name:
        return TokenKind.IDENTIFIER
    if ttype in Punctuation:
        return TokenKind.PUNCTUATION
    if ttype in Operator:
        return TokenKind.OPERATOR
    if text.isspace():
        return TokenKind.WHITESPACE
    return TokenKind.OTHER


def _merge_strings(tokens: Iterable[Token]) -> list[Token]:
    """Fuse adjacent STRING tokens so a quoted string is a single token."""
    merged: list[Token] = []
    for token in tokens:
        if (
            token.kind is TokenKind.STRING
            and merged
            and merged[-1].kind is TokenKind.STRING
        ):
            previous = merged.pop()
            token = Token(TokenKind.STRING, previous.text + token.text, previous.position)
        merged.append(token)
    return merged


def _promote_numbers(tokens: list[Token]) -> list[Token]:
    """Turn identifier/punctuation runs that spell a number into NUMBER tokens."""
    result: list[Token] = []
    index = 0
    while index < len(tokens):
        if tokens[index].kind not in _RUN_KINDS:
            result.append(tokens[index])
            index += 1
            continue

        end = index
        while end < len(tokens) and tokens[end].kind in _RUN_KINDS:
            end += 1
        run = tokens[index:end]
        text = "".join(t.text for t in run)
        if _NUMERIC_RUN_RE.fullmatch(text):
            result.append(Token(TokenKind.NUMBER, text, run[0].position))
        else:
            result.extend(run)
        index = end
    return result


class PygmentsTokenizer:
    """Tokenizer built on a Pygments lexer.

    Attributes:
        lexer_name: Pygments lexer alias (default: "powershell").

    Example:
        >>> tokenizer = PygmentsTokenizer()
        >>> [t.kind.value for t in tokenizer.tokenize("echo $name")]
        ['keyword', 'variable']
    """

    def __init__(self, lexer_name: str = "powershell") -> None:
        """Initialize the tokenizer.

        Args:
            lexer_name: Pygments lexer alias to tokenize with.

        Raises:
            TokenizeError: If Pygments has no lexer for ``lexer_name``.
        """
        self.lexer_name = lexer_name
        try:
            self._lexer: Lexer = get_lexer_by_name(
                lexer_name, stripnl=False, ensurenl=False
            )
        except ClassNotFound as e:
            raise TokenizeError(f"No lexer available for '{lexer_name}'") from e

    def tokenize(self, command: str) -> list[Token]:
        """Split a command into typed tokens.

        Args:
            command: Raw command text.

        Returns:
            Tokens in source order covering the whole command.

        Raises:
            TokenizeError: If the lexer fails on the input.
        """
        try:
            raw = [
                Token(map_token_type(ttype, value), value, index)
                for index, ttype, value in self._lexer.get_tokens_unprocessed(command)
                if value
            ]
        except Exception as e:
            logger.warning("Tokenizer %s failed: %s", self.lexer_name, e)
            raise TokenizeError(f"Failed to tokenize command: {e}") from e

        return _promote_numbers(_merge_strings(raw))
