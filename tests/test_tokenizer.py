import pytest

from progopts.exceptions import TokenizeError, TrailingEscapeError, UnterminatedQuoteError
from progopts.tokenizer import tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("prog", ["prog"]),
        ('host "a b" c', ["host", "a b", "c"]),
        ("a\\ b", ["a b"]),
        ('""', [""]),
        ('a "" b', ["a", "", "b"]),
        ("a  b", ["a", "b"]),
        ("  a b  ", ["a", "b"]),
        ('say \\"hi\\"', ["say", '"hi"']),
        ('"\\"quoted\\""', ['"quoted"']),
        ("back\\\\slash", ["back\\slash"]),
        ('pre"mid dle"post', ["premid dlepost"]),
        ('--name="x y"', ["--name=x y"]),
    ],
)
def test_tokenize(text, expected):
    assert tokenize(text) == expected


def test_tokenize_unterminated_quote():
    with pytest.raises(UnterminatedQuoteError):
        tokenize('"unterminated')


def test_tokenize_trailing_escape():
    with pytest.raises(TrailingEscapeError, match="end of string"):
        tokenize("abc\\")


def test_tokenize_errors_share_base():
    for text in ('"open', "x\\"):
        with pytest.raises(TokenizeError):
            tokenize(text)


def test_tokenize_keeps_non_space_characters():
    text = 'prog --host "example com" -p 8080 file\\ one'
    joined = "".join(tokenize(text))
    expected = text.replace(" ", "").replace('"', "").replace("\\", "")
    assert joined.replace(" ", "") == expected
