"""
Test suite for the Lox lexer.

Tests cover:
- Punctuation, one/two character operators, comments
- String, number and identifier/keyword scanning
- Line accounting
- Error aggregation and the EOF invariant
"""

import pytest

from pylox.lexer import (
    Lexer, Token, TokenType, KEYWORDS, scan_tokens, tokenize_string,
    InvalidUtf8Char, UnexpectedCharacter, UnterminatedString, UnterminatedComment
)


def types(tokens):
    return [t.type for t in tokens]


class TestEndOfInput:
    """Exactly one EOF token, always last."""

    @pytest.mark.parametrize("source", [
        "",
        "1 + 2",
        "// only a comment",
        '"unterminated',
        "@ # $",
        "(\n)\n",
    ])
    def test_single_trailing_eof(self, source):
        tokens, _ = scan_tokens(source)
        eofs = [i for i, t in enumerate(tokens) if t.type == TokenType.EOF]
        assert eofs == [len(tokens) - 1]

    def test_eof_on_last_line(self):
        tokens, _ = scan_tokens("1\n2\n")
        assert tokens[-1] == Token(TokenType.EOF, "", None, 3)


class TestOperators:
    """Single-character tokens and '=' suffixed operators."""

    def test_single_characters(self):
        tokens, errors = scan_tokens("(){},.-+;*/")
        assert errors == []
        assert types(tokens) == [
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
            TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH, TokenType.EOF,
        ]

    def test_one_or_two_characters(self):
        tokens, _ = scan_tokens("! != = == < <= > >=")
        assert types(tokens)[:-1] == [
            TokenType.BANG, TokenType.BANG_EQUAL,
            TokenType.EQUAL, TokenType.EQUAL_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
        ]
        assert [t.lexeme for t in tokens][:-1] == ["!", "!=", "=", "==", "<", "<=", ">", ">="]

    def test_adjacent_operators(self):
        tokens, _ = scan_tokens("!==")
        assert types(tokens)[:-1] == [TokenType.BANG_EQUAL, TokenType.EQUAL]


class TestComments:

    def test_line_comment_skipped(self):
        tokens, errors = scan_tokens("// comment\n1")
        assert errors == []
        assert tokens == [
            Token(TokenType.NUMBER, "1", 1.0, 2),
            Token(TokenType.EOF, "", None, 2),
        ]

    def test_line_comment_at_end_of_input(self):
        tokens, _ = scan_tokens("1 // trailing")
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_block_comment_counts_lines(self):
        tokens, errors = scan_tokens("/* one\ntwo */ 3")
        assert errors == []
        assert tokens[0] == Token(TokenType.NUMBER, "3", 3.0, 2)

    def test_block_comment_does_not_nest(self):
        tokens, _ = scan_tokens("/* a /* b */ 1 */")
        assert types(tokens) == [TokenType.NUMBER, TokenType.STAR, TokenType.SLASH, TokenType.EOF]

    def test_unterminated_block_comment(self):
        tokens, errors = scan_tokens("1\n/* never\nclosed")
        assert errors == [UnterminatedComment(2)]
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]


class TestLiterals:

    def test_string(self):
        tokens, errors = scan_tokens('"hello world"')
        assert errors == []
        assert tokens[0] == Token(TokenType.STRING, '"hello world"', "hello world", 1)
        assert tokens[0].is_literal
        assert not tokens[1].is_literal

    def test_empty_string(self):
        tokens, _ = scan_tokens('""')
        assert tokens[0].value == ""

    def test_multiline_string(self):
        tokens, errors = scan_tokens('"a\nb" 1')
        assert errors == []
        assert tokens[0].value == "a\nb"
        assert tokens[1].line == 2

    def test_unterminated_string(self):
        tokens, errors = scan_tokens('"abc')
        assert errors == [UnterminatedString(1)]
        assert isinstance(errors[0], UnterminatedString)
        assert types(tokens) == [TokenType.EOF]

    def test_unterminated_string_reports_start_line(self):
        _, errors = scan_tokens('1\n"abc\ndef\n')
        assert errors[0].line == 2

    def test_utf8_string(self):
        tokens, errors = scan_tokens('"héllo ✓"')
        assert errors == []
        assert tokens[0].value == "héllo ✓"

    @pytest.mark.parametrize("source, value", [
        ("0", 0.0),
        ("123", 123.0),
        ("45.67", 45.67),
        ("007.50", 7.5),
    ])
    def test_number(self, source, value):
        tokens, _ = scan_tokens(source)
        assert tokens[0] == Token(TokenType.NUMBER, source, value, 1)
        assert isinstance(tokens[0].value, float)

    def test_trailing_dot_is_separate_token(self):
        tokens, _ = scan_tokens("1.")
        assert tokens == [
            Token(TokenType.NUMBER, "1", 1.0, 1),
            Token(TokenType.DOT, ".", None, 1),
            Token(TokenType.EOF, "", None, 1),
        ]

    def test_leading_dot_is_separate_token(self):
        tokens, _ = scan_tokens(".5")
        assert types(tokens) == [TokenType.DOT, TokenType.NUMBER, TokenType.EOF]

    def test_method_call_on_number(self):
        tokens, _ = scan_tokens("1.abs")
        assert types(tokens) == [TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF]


class TestIdentifiers:

    def test_keyword_prefix_is_identifier(self):
        tokens, _ = scan_tokens("classroom")
        assert tokens == [
            Token(TokenType.IDENTIFIER, "classroom", "classroom", 1),
            Token(TokenType.EOF, "", None, 1),
        ]

    @pytest.mark.parametrize("word, token_type", sorted(KEYWORDS.items()))
    def test_keywords(self, word, token_type):
        tokens, _ = scan_tokens(word)
        assert tokens[0].type == token_type
        assert tokens[0].value is None
        assert tokens[0].is_keyword

    def test_underscores_and_digits(self):
        tokens, _ = scan_tokens("_tmp1 x_2")
        assert [t.value for t in tokens[:-1]] == ["_tmp1", "x_2"]

    def test_keywords_are_case_sensitive(self):
        tokens, _ = scan_tokens("Class NIL")
        assert types(tokens)[:-1] == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]


class TestLines:

    def test_line_numbers(self):
        tokens, _ = scan_tokens("1\n2\n\n3")
        assert [t.line for t in tokens] == [1, 2, 4, 4]

    def test_carriage_return_and_tabs(self):
        tokens, errors = scan_tokens("\t1\r\n 2")
        assert errors == []
        assert [t.line for t in tokens[:-1]] == [1, 2]


class TestErrors:
    """Scanning never stops at the first bad lexeme."""

    def test_errors_are_aggregated(self):
        tokens, errors = scan_tokens("@ 1 # 2")
        assert errors == [UnexpectedCharacter("@", 1), UnexpectedCharacter("#", 1)]
        assert [t.value for t in tokens] == [1.0, 2.0, None]

    def test_errors_on_several_lines(self):
        _, errors = scan_tokens('1 @\n"open')
        assert [type(e) for e in errors] == [UnexpectedCharacter, UnterminatedString]
        assert [e.line for e in errors] == [1, 2]

    def test_multibyte_unexpected_character(self):
        tokens, errors = scan_tokens("é 1")
        assert len(errors) == 1
        assert errors[0].char == "é"
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_invalid_utf8_byte(self):
        tokens, errors = scan_tokens(b"\xff 1")
        assert errors == [InvalidUtf8Char(1)]
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_invalid_utf8_in_string(self):
        tokens, errors = scan_tokens(b'"ab\xfe" 2')
        assert errors == [InvalidUtf8Char(1)]
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_lone_surrogate_in_text(self):
        tokens, errors = scan_tokens("\ud800 1")
        assert errors
        assert set(errors) == {InvalidUtf8Char(1)}
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_lone_surrogate_in_string(self):
        tokens, errors = scan_tokens('"a\udc80" 2')
        assert errors == [InvalidUtf8Char(1)]
        assert types(tokens) == [TokenType.NUMBER, TokenType.EOF]

    def test_error_messages_and_codes(self):
        _, errors = scan_tokens('$\n"x')
        assert str(errors[0]) == "Unexpected character `$` at 1"
        assert errors[0].diagnostic.code == "L002"
        assert str(errors[1]) == "Unterminated string starting at 2"
        assert errors[1].diagnostic.code == "L003"

    def test_diagnostic_text(self):
        _, errors = scan_tokens('"x')
        text = str(errors[0].diagnostic)
        assert text.startswith("ERROR: Unterminated string starting at 1\n")
        assert "  --> line 1\n" in text
        assert '  help: String literals must be closed with a matching " quote.\n' in text
        assert '    - Add a closing " quote\n' in text

    def test_lexer_keeps_errors(self):
        lexer = Lexer("1 ?")
        lexer.scan_tokens()
        assert lexer.has_errors()
        assert lexer.errors == [UnexpectedCharacter("?", 1)]

    def test_tokenize_string_raises_first_error(self):
        with pytest.raises(UnexpectedCharacter):
            tokenize_string("1 ~ ~")

    def test_tokenize_string_clean(self):
        assert types(tokenize_string("nil")) == [TokenType.NIL, TokenType.EOF]
