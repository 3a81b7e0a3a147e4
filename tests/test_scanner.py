import pytest
from mal.errors import LexError, UnterminatedString
from mal.scanner import Scanner, tokenize
from mal.types import TokenKind

K = TokenKind


def kinds(src):
    return [t.kind for t in tokenize(src)]


def texts(src):
    return [t.text for t in tokenize(src)]


def test_empty_source_is_eof():
    toks = tokenize("")
    assert len(toks) == 1
    assert toks[0].kind is K.EOF
    assert toks[0].text == "\0"


def test_list_tokens():
    assert kinds("(1 2)") == [K.LEFT_PAREN, K.NUMBER, K.NUMBER, K.RIGHT_PAREN, K.EOF]


def test_commas_are_whitespace():
    assert texts("1,2 ,, 3") == ["1", "2", "3", "\0"]


def test_comments_and_whitespace_interleaved():
    src = "; first\n  ; second\r\n\t 42 ; trailing"
    assert texts(src) == ["42", "\0"]


def test_comment_only_source():
    assert kinds(";; comment only") == [K.EOF]


def test_decimal_number():
    toks = tokenize("3.25")
    assert toks[0].kind is K.NUMBER
    assert toks[0].text == "3.25"


def test_trailing_dot_splits_from_number():
    toks = tokenize("12.")
    assert [(t.kind, t.text) for t in toks] == [
        (K.NUMBER, "12"),
        (K.SYMBOL, "."),
        (K.EOF, "\0"),
    ]


def test_second_dot_starts_symbol():
    assert texts("1.2.3") == ["1.2", ".3", "\0"]
    assert kinds("1.2.3")[:2] == [K.NUMBER, K.SYMBOL]


def test_digits_then_letters():
    assert [(t.kind, t.text) for t in tokenize("123abc")[:2]] == [
        (K.NUMBER, "123"),
        (K.SYMBOL, "abc"),
    ]


def test_negative_number_is_symbol():
    toks = tokenize("-123")
    assert toks[0].kind is K.SYMBOL
    assert toks[0].text == "-123"


def test_symbol_punctuation():
    src = "!#$%&*_-+=:<>.|"
    toks = tokenize(src)
    assert toks[0].kind is K.SYMBOL
    assert toks[0].text == src


def test_unicode_letters_are_symbols():
    toks = tokenize("λx")
    assert toks[0].kind is K.SYMBOL
    assert toks[0].text == "λx"


def test_special_characters():
    toks = tokenize("[]{}'`~^@")
    assert [t.kind for t in toks[:-1]] == [K.SPECIAL] * 9
    assert "".join(t.text for t in toks[:-1]) == "[]{}'`~^@"


def test_string_keeps_quotes():
    toks = tokenize('"abc def"')
    assert toks[0].kind is K.STRING
    assert toks[0].text == '"abc def"'


def test_string_escaped_quote_does_not_terminate():
    assert texts(r'"a\"b" x') == [r'"a\"b"', "x", "\0"]


def test_string_escaped_backslash():
    assert texts(r'"a\\" 1') == [r'"a\\"', "1", "\0"]


def test_string_keeps_comment_and_parens():
    assert texts('"(; not a comment)"') == ['"(; not a comment)"', "\0"]


def test_unterminated_string():
    with pytest.raises(UnterminatedString, match="unterminated"):
        tokenize('"abc')


def test_unterminated_string_after_escape():
    with pytest.raises(UnterminatedString):
        tokenize(r'"abc\"')


def test_unexpected_character():
    with pytest.raises(LexError, match="unexpected character") as exc:
        tokenize("(a ?)")
    assert exc.value.char == "?"
    assert exc.value.pos == 3


def test_token_positions():
    toks = tokenize("  (ab 12)")
    assert [t.pos for t in toks] == [2, 3, 6, 8, 9]


def test_scanner_repeats_eof():
    sc = Scanner("x")
    assert sc.next_token().kind is K.SYMBOL
    assert sc.next_token().kind is K.EOF
    assert sc.next_token().kind is K.EOF


def test_scanner_iterates_lazily():
    sc = Scanner("(a ?")
    it = iter(sc)
    assert next(it).kind is K.LEFT_PAREN
    assert next(it).kind is K.SYMBOL
    with pytest.raises(LexError):
        next(it)
