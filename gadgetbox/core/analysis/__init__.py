"""Analysis module for guessing placeholders in shell commands.

This module provides:
- Token / TokenKind / Tokenizer: Token model and tokenizer protocol
- PygmentsTokenizer: Tokenizer backed by a Pygments lexer
- IdentifierOracle and implementations: Known command/keyword lookups
- analyze_tokens / CommandClassifier: The classification algorithm
- CommandAnalyzer: Tokenize and classify raw command text
"""

from gadgetbox.core.analysis.analyzer import CommandAnalyzer
from gadgetbox.core.analysis.classifier import (
    AnalysisResult,
    CommandClassifier,
    Suggestion,
    analyze_tokens,
    is_likely_path,
)
from gadgetbox.core.analysis.lexer import PygmentsTokenizer
from gadgetbox.core.analysis.oracle import (
    IdentifierOracle,
    PowerShellCommandOracle,
    StaticIdentifierOracle,
)
from gadgetbox.core.analysis.tokens import Token, Tokenizer, TokenKind

__all__ = [
    "AnalysisResult",
    "CommandAnalyzer",
    "CommandClassifier",
    "IdentifierOracle",
    "PowerShellCommandOracle",
    "PygmentsTokenizer",
    "StaticIdentifierOracle",
    "Suggestion",
    "Token",
    "TokenKind",
    "Tokenizer",
    "analyze_tokens",
    "is_likely_path",
]
