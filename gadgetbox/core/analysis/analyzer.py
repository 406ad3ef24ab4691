# gadgetbox/core/analysis/analyzer.py
"""Command analyzer combining a tokenizer, an oracle and the classifier.

This is the entry point for turning raw command text into placeholder
suggestions. It does not print or prompt; presenting the result is up to
the caller.
"""

import logging

from gadgetbox.config import settings
from gadgetbox.core.analysis.classifier import AnalysisResult, CommandClassifier
from gadgetbox.core.analysis.lexer import PygmentsTokenizer
from gadgetbox.core.analysis.oracle import IdentifierOracle, PowerShellCommandOracle
from gadgetbox.core.analysis.tokens import Tokenizer

logger = logging.getLogger(__name__)


class CommandAnalyzer:
    """Analyze command text for placeholder suggestions.

    Attributes:
        tokenizer: Tokenizer used to split commands.
        classifier: Classifier bound to the known-identifier oracle.

    Example:
        >>> from gadgetbox.core.analysis.oracle import StaticIdentifierOracle
        >>> analyzer = CommandAnalyzer(oracle=StaticIdentifierOracle())
        >>> result = analyzer.analyze('Write-Output "hello"')
        >>> result.template
        'Write-Output {{string}}'
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        oracle: IdentifierOracle | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            tokenizer: Tokenizer to use. Defaults to a Pygments tokenizer for
                the configured lexer.
            oracle: Known-identifier oracle. Defaults to a PowerShell command
                oracle for the configured shell (loaded on first use).
        """
        if tokenizer is None:
            tokenizer = PygmentsTokenizer(settings.lexer)
        if oracle is None:
            # An empty StaticIdentifierOracle is falsy, so compare with None.
            oracle = PowerShellCommandOracle(
                shell=settings.shell_executable,
                timeout=settings.known_commands_timeout,
            )
        self.tokenizer = tokenizer
        self.classifier = CommandClassifier(oracle)

    def analyze(self, command: str) -> AnalysisResult:
        """Analyze a command.

        Args:
            command: Raw command text.

        Returns:
            AnalysisResult with suggestions in order of appearance and the
            parameterized template.

        Raises:
            TokenizeError: If the tokenizer fails.
        """
        if not command.strip():
            return AnalysisResult(source=command, template=command.strip())

        tokens = self.tokenizer.tokenize(command)
        result = self.classifier.analyze(tokens)
        logger.debug(
            "Analyzed command: %d tokens, %d suggestions",
            len(tokens),
            len(result.suggestions),
        )
        return result
