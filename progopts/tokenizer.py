# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a single shell-like command line string into argument tokens.

Rules:
- A double quote toggles quote mode and is not copied into the token.
- Outside quotes, a space ends the current token. Runs of spaces do not
  produce empty tokens.
- A backslash copies the next character literally, inside or outside quotes.
- An explicitly quoted empty string (`""`) is kept as an empty token.

Example:
    tokenize('host "a b" c')  → ["host", "a b", "c"]
    tokenize("a\\ b")         → ["a b"]
"""
from progopts.exceptions import TrailingEscapeError, UnterminatedQuoteError

QUOTE = '"'
ESCAPE = "\\"
DELIMITER = " "


def tokenize(text: str) -> list[str]:
    """
    Split `text` into tokens, honoring double quotes and backslash escapes.

    Args:
        text (str): The raw command line.

    Returns:
        list[str]: The tokens in input order.

    Raises:
        TrailingEscapeError: If the input ends with an unescaped backslash.
        UnterminatedQuoteError: If the input ends inside an open quote.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_token = False
    in_quote = False
    i = 0
    while i < len(text):
        char = text[i]
        if char == QUOTE:
            in_quote = not in_quote
            in_token = True
        elif char == DELIMITER and not in_quote:
            if in_token:
                tokens.append("".join(buffer))
                buffer.clear()
                in_token = False
        else:
            if char == ESCAPE:
                i += 1
                if i >= len(text):
                    raise TrailingEscapeError()
                char = text[i]
            buffer.append(char)
            in_token = True
        i += 1

    if in_quote:
        raise UnterminatedQuoteError()

    if in_token:
        tokens.append("".join(buffer))
    return tokens
