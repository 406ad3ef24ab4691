# tests/test_lexer.py
"""Tests for the Pygments tokenizer adapter."""

import pytest
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String, Text

from gadgetbox.core.analysis.lexer import PygmentsTokenizer, map_token_type
from gadgetbox.core.analysis.tokens import TokenKind
from gadgetbox.core.errors import TokenizeError

K = TokenKind


@pytest.fixture
def tokenizer() -> PygmentsTokenizer:
    """PowerShell tokenizer."""
    return PygmentsTokenizer("powershell")


def _kinds(tokens) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.text) for t in tokens]


class TestMapTokenType:
    """Test suite for map_token_type."""

    @pytest.mark.parametrize(
        ("ttype", "text", "expected"),
        [
            (String.Double, '"x"', K.STRING),
            (String.Single, "'x'", K.STRING),
            (String.Doc, ".SYNOPSIS", K.COMMENT),
            (Comment, "# hi", K.COMMENT),
            (Number.Integer, "1", K.NUMBER),
            (Name.Variable, "$x", K.VARIABLE),
            (Name.Builtin, "Get-Item", K.KEYWORD),
            (Name.Constant, "[int]", K.KEYWORD),
            (Keyword, "if", K.KEYWORD),
            (Name, "foo", K.IDENTIFIER),
            (Punctuation, "\\", K.PUNCTUATION),
            (Operator, "-eq", K.OPERATOR),
            (Text, "  ", K.WHITESPACE),
            (Text, "?", K.OTHER),
        ],
    )
    def test_mapping(self, ttype, text: str, expected: TokenKind) -> None:
        """Test each Pygments type family."""
        assert map_token_type(ttype, text) is expected


class TestPygmentsTokenizer:
    """Test suite for PygmentsTokenizer."""

    def test_get_content_command(self, tokenizer: PygmentsTokenizer) -> None:
        """Test a cmdlet with a quoted path and a flag."""
        tokens = tokenizer.tokenize(r'Get-Content "C:\Users\me\file.txt" -Encoding UTF8')

        assert _kinds(tokens) == [
            (K.KEYWORD, "Get-Content"),
            (K.WHITESPACE, " "),
            (K.STRING, r'"C:\Users\me\file.txt"'),
            (K.WHITESPACE, " "),
            (K.IDENTIFIER, "-Encoding"),
            (K.WHITESPACE, " "),
            (K.IDENTIFIER, "UTF8"),
        ]

    def test_quoted_string_is_one_token(self, tokenizer: PygmentsTokenizer) -> None:
        """Test that string pieces are fused, quotes included."""
        tokens = tokenizer.tokenize('Write-Output "hello world"')

        strings = [t for t in tokens if t.kind is K.STRING]
        assert len(strings) == 1
        assert strings[0].text == '"hello world"'
        assert strings[0].position == len("Write-Output ")

    def test_single_quoted_string(self, tokenizer: PygmentsTokenizer) -> None:
        """Test single-quoted literals."""
        tokens = tokenizer.tokenize("Write-Output 'hi'")

        assert (K.STRING, "'hi'") in _kinds(tokens)

    def test_variable(self, tokenizer: PygmentsTokenizer) -> None:
        """Test scoped and plain variable references."""
        tokens = tokenizer.tokenize("Set-Location $env:TEMP")

        assert (K.VARIABLE, "$env:TEMP") in _kinds(tokens)

    def test_integer_is_number(self, tokenizer: PygmentsTokenizer) -> None:
        """Test that a bare integer argument becomes a number."""
        tokens = tokenizer.tokenize("Start-Sleep -Seconds 5")

        assert tokens[-1].kind is K.NUMBER
        assert tokens[-1].text == "5"

    @pytest.mark.parametrize("literal", ["3.5", "10MB", "0x1F", "-1"])
    def test_numeric_runs_promoted(self, tokenizer: PygmentsTokenizer, literal: str) -> None:
        """Test that decimal, suffixed, hex and negative literals become one number."""
        tokens = tokenizer.tokenize(f"Get-Random -Maximum {literal}")

        assert _kinds(tokens)[-1] == (K.NUMBER, literal)

    def test_words_with_digits_not_numbers(self, tokenizer: PygmentsTokenizer) -> None:
        """Test that identifiers containing digits stay identifiers."""
        tokens = tokenizer.tokenize("Get-Item file1")

        assert _kinds(tokens)[-1] == (K.IDENTIFIER, "file1")

    def test_path_pieces(self, tokenizer: PygmentsTokenizer) -> None:
        """Test that an unquoted path is split into words and punctuation."""
        tokens = tokenizer.tokenize(r"cd C:\Users")

        assert _kinds(tokens) == [
            (K.KEYWORD, "cd "),
            (K.IDENTIFIER, "C"),
            (K.PUNCTUATION, ":"),
            (K.PUNCTUATION, "\\"),
            (K.IDENTIFIER, "Users"),
        ]

    def test_operator(self, tokenizer: PygmentsTokenizer) -> None:
        """Test comparison operators."""
        tokens = tokenizer.tokenize("$a -eq $b")

        assert (K.OPERATOR, "-eq") in _kinds(tokens)

    def test_comment(self, tokenizer: PygmentsTokenizer) -> None:
        """Test line comments."""
        tokens = tokenizer.tokenize("Get-Date # today")

        assert _kinds(tokens)[-1] == (K.COMMENT, "# today")

    @pytest.mark.parametrize(
        "command",
        [
            r'Get-Content "C:\Users\me\file.txt" -Encoding UTF8',
            "Copy-Item C:\\src\\a.txt /tmp/out -Force\n",
            "  ls  ",
            "if ($x -gt 10MB) { Write-Output 'big' }",
            "echo {{literal}}",
            "",
        ],
    )
    def test_lossless(self, tokenizer: PygmentsTokenizer, command: str) -> None:
        """Test that tokens cover the command exactly, with correct offsets."""
        tokens = tokenizer.tokenize(command)

        assert "".join(t.text for t in tokens) == command
        offset = 0
        for token in tokens:
            assert token.position == offset
            offset += len(token.text)

    def test_unknown_lexer(self) -> None:
        """Test that a missing lexer is reported as TokenizeError."""
        with pytest.raises(TokenizeError, match="No lexer"):
            PygmentsTokenizer("no-such-language-xyz")

    def test_lexer_failure_wrapped(self, tokenizer: PygmentsTokenizer, mocker) -> None:
        """Test that lexer exceptions surface as TokenizeError."""
        fake = mocker.Mock()
        fake.get_tokens_unprocessed.side_effect = RuntimeError("boom")
        tokenizer._lexer = fake

        with pytest.raises(TokenizeError, match="boom"):
            tokenizer.tokenize("Get-Date")

    def test_other_lexer(self) -> None:
        """Test that another Pygments lexer can be configured."""
        tokens = PygmentsTokenizer("bash").tokenize('echo "hi"')

        assert (K.STRING, '"hi"') in _kinds(tokens)
