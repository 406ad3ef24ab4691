# gadgetbox/core/analysis/tokens.py
"""Token model and tokenizer protocol for command analysis.

The classifier never looks at raw lexer output. Tokenizers translate their
own token types into the closed ``TokenKind`` set defined here.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class TokenKind(Enum):
    """Lexical category of a command token."""

    STRING = "string"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    VARIABLE = "variable"
    PUNCTUATION = "punctuation"
    OPERATOR = "operator"
    KEYWORD = "keyword"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A typed slice of the analysed command.

    Attributes:
        kind: Lexical category.
        text: Exact source text of the token.
        position: Character offset of the token in the source command.
    """

    kind: TokenKind
    text: str
    position: int


class Tokenizer(Protocol):
    """Protocol for splitting a command into tokens.

    Implementations must cover the whole input: joining the ``text`` of the
    returned tokens in order reproduces the command exactly. Failures are
    reported by raising ``TokenizeError``.
    """

    def tokenize(self, command: str) -> Sequence[Token]:
        """Split ``command`` into ordered tokens.

        Args:
            command: Raw command text.

        Returns:
            Tokens in source order.
        """
        ...
