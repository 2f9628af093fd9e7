import pytest

from tgsh.lexer import RESERVED_WORDS, LexError, Lexer, Token, TokenKind


def collect(text):
    lexer = Lexer(text)
    out = []
    while True:
        try:
            out.append(next(lexer))
        except StopIteration:
            return out
        except LexError as exc:
            out.append(("error", exc.char))


def test_single_quote():
    lexer = Lexer("'hello world'")
    assert next(lexer) == (0, Token(TokenKind.WORD, "'hello world'"), 13)


def test_keywords():
    lexer = Lexer("case")
    assert next(lexer) == (0, Token(TokenKind.CASE), 4)


def test_all_keywords():
    text = "if then else elif fi do done case esac while until for in"
    kinds = [tok.kind for _, tok, _ in Lexer(text)]
    assert kinds == [
        TokenKind.IF, TokenKind.THEN, TokenKind.ELSE, TokenKind.ELIF, TokenKind.FI,
        TokenKind.DO, TokenKind.DONE, TokenKind.CASE, TokenKind.ESAC, TokenKind.WHILE,
        TokenKind.UNTIL, TokenKind.FOR, TokenKind.IN,
    ]


def test_keyword_prefix_is_word():
    assert list(Lexer("iffy")) == [(0, Token(TokenKind.WORD, "iffy"), 4)]


def test_pipeline_spans():
    assert list(Lexer("ls -al | wc")) == [
        (0, Token(TokenKind.WORD, "ls"), 2),
        (3, Token(TokenKind.WORD, "-al"), 6),
        (7, Token(TokenKind.PIPE), 8),
        (9, Token(TokenKind.WORD, "wc"), 11),
    ]


def test_and_if():
    assert list(Lexer("a && b")) == [
        (0, Token(TokenKind.WORD, "a"), 1),
        (2, Token(TokenKind.AND_IF), 4),
        (5, Token(TokenKind.WORD, "b"), 6),
    ]


@pytest.mark.parametrize(
    "text, kind",
    [
        (";;", TokenKind.DSEMI),
        (";", TokenKind.SEMI),
        ("&", TokenKind.AMP),
        ("||", TokenKind.OR_IF),
        ("|", TokenKind.PIPE),
        ("<<", TokenKind.DLESS),
        ("<&", TokenKind.LESSAND),
        ("<>", TokenKind.LESSGREAT),
        ("<", TokenKind.LESS),
        (">>", TokenKind.DGREAT),
        (">&", TokenKind.GREATAND),
        (">|", TokenKind.CLOBBER),
        (">", TokenKind.GREAT),
        ("(", TokenKind.LPAREN),
        (")", TokenKind.RPAREN),
        ("{", TokenKind.LBRACE),
        ("}", TokenKind.RBRACE),
        ("!", TokenKind.BANG),
        ("`", TokenKind.BACKTICK),
        ("=", TokenKind.EQUAL),
        ("\\", TokenKind.BACKSLASH),
        ("\n", TokenKind.NEWLINE),
    ],
)
def test_operators(text, kind):
    assert list(Lexer(text)) == [(0, Token(kind), len(text))]


def test_assignment_is_one_word():
    assert list(Lexer("x=1")) == [(0, Token(TokenKind.WORD, "x=1"), 3)]


def test_leading_equal_is_separate():
    assert list(Lexer("=x")) == [
        (0, Token(TokenKind.EQUAL), 1),
        (1, Token(TokenKind.WORD, "x"), 2),
    ]


def test_word_stops_at_semicolon():
    assert [tok for _, tok, _ in Lexer("a;b")] == [
        Token(TokenKind.WORD, "a"),
        Token(TokenKind.SEMI),
        Token(TokenKind.WORD, "b"),
    ]


def test_double_quote():
    assert list(Lexer('"hi there"')) == [(0, Token(TokenKind.WORD, '"hi there"'), 10)]


def test_unterminated_quote_takes_rest():
    assert list(Lexer("'abc")) == [(0, Token(TokenKind.WORD, "'abc"), 4)]


def test_lone_quote():
    assert list(Lexer("'")) == [(0, Token(TokenKind.WORD, "'"), 1)]


def test_unrecognized_char():
    with pytest.raises(LexError) as info:
        next(Lexer("*"))
    assert (info.value.start, info.value.char, info.value.end) == (0, "*", 1)
    assert str(info.value) == "unrecognized character * in range 0:1"


def test_lexing_continues_after_error():
    assert collect("a * b") == [
        (0, Token(TokenKind.WORD, "a"), 1),
        ("error", "*"),
        (4, Token(TokenKind.WORD, "b"), 5),
    ]


def test_control_character_is_error():
    assert collect("\x01") == [("error", "\x01")]


def test_whitespace_skipped():
    assert list(Lexer(" \t ")) == []


def test_input_property():
    assert Lexer("echo hi").input == "echo hi"


@pytest.mark.parametrize("word", RESERVED_WORDS)
def test_reserved_words_are_not_plain_words(word):
    tokens = list(Lexer(word))
    assert len(tokens) == 1
    _, token, end = tokens[0]
    assert token.kind is not TokenKind.WORD
    assert end == len(word)