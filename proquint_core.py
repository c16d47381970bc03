#!/usr/bin/env python3
"""Shared proquint codec and big-integer phrase conversion core."""

import secrets

# Reference: https://arxiv.org/html/0901.4016
CONSONANTS = "bdfghjklmnprstvz"
VOWELS = "aiou"
CONSONANT_VALUES = {c: i for i, c in enumerate(CONSONANTS)}
VOWEL_VALUES = {v: i for i, v in enumerate(VOWELS)}
WORD_BITS = 16
WORD_MASK = 0xFFFF
TOKEN_LENGTH = 5
SEPARATOR = "-"
HEX_PREFIX = "0x"
DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdef")


def encode_word(value: int) -> str:
    if value < 0 or value > WORD_MASK:
        raise ValueError(f"word must be between 0 and {WORD_MASK}, got {value}")
    return (
        CONSONANTS[(value >> 12) & 0xF]
        + VOWELS[(value >> 10) & 0x3]
        + CONSONANTS[(value >> 6) & 0xF]
        + VOWELS[(value >> 4) & 0x3]
        + CONSONANTS[value & 0xF]
    )


ZERO_TOKEN = encode_word(0)


def is_valid_token(s: str) -> bool:
    return (
        len(s) == TOKEN_LENGTH
        and s[0] in CONSONANT_VALUES
        and s[1] in VOWEL_VALUES
        and s[2] in CONSONANT_VALUES
        and s[3] in VOWEL_VALUES
        and s[4] in CONSONANT_VALUES
    )


def _token_value(token: str) -> int:
    return (
        CONSONANT_VALUES[token[0]] << 12
        | VOWEL_VALUES[token[1]] << 10
        | CONSONANT_VALUES[token[2]] << 6
        | VOWEL_VALUES[token[3]] << 4
        | CONSONANT_VALUES[token[4]]
    )


def decode_token(token: str) -> int:
    """Checked entry point: validate a single token and return its 16-bit word."""
    if not is_valid_token(token):
        raise ValueError(f"invalid proquint token: {token!r}")
    return _token_value(token)


def proquint_words(bit_length: int) -> int:
    # 0 bits still takes one word
    return max(bit_length - 1, 0) // WORD_BITS + 1


def _split_words(i: int, count: int) -> list[str]:
    words = []
    for _ in range(count):
        words.append(encode_word(i & WORD_MASK))
        i >>= WORD_BITS
    words.reverse()
    return words


def encode(i: int, leading_zeros: int = 0) -> str:
    """Encode a non-negative integer as a hyphen-joined proquint phrase.

    The most significant word comes first. ``leading_zeros`` extra zero
    tokens are prepended so that suppressed leading zero digits survive
    a round trip through :func:`decode`.
    """
    if i < 0:
        raise ValueError(f"cannot encode negative number {i}")
    if leading_zeros < 0:
        raise ValueError(f"leading_zeros must be >= 0, got {leading_zeros}")

    words = _split_words(i, proquint_words(i.bit_length()))
    return SEPARATOR.join([ZERO_TOKEN] * leading_zeros + words)


def decode(phrase: str) -> str:
    """Decode a proquint phrase into decimal text.

    Leading zero-valued words are rendered as literal "0" characters in
    front of the number, one per word. A phrase made only of zero words
    decodes to "0". Raises ValueError if any token is malformed.
    """
    tokens = phrase.split(SEPARATOR)
    if not all(is_valid_token(t) for t in tokens):
        raise ValueError(f"invalid proquint: {phrase}")
    numbers = [_token_value(t) for t in tokens]

    zeros = 0
    for idx, n in enumerate(numbers):
        if n != 0:
            zeros = idx
            break

    value = 0
    for n in numbers[zeros:]:
        value = (value << WORD_BITS) | n
    return "0" * zeros + str(value)


def random_phrase(bits: int) -> str:
    """Return a random phrase with capacity for at least ``bits`` bits.

    The phrase always holds exactly ``proquint_words(bits)`` tokens, drawn
    from the operating system CSPRNG.
    """
    if bits <= 0:
        raise ValueError(f"random bit length must be > 0, got {bits}")
    count = proquint_words(bits)
    try:
        value = secrets.randbits(count * WORD_BITS)
    except (OSError, NotImplementedError) as e:
        raise RuntimeError(f"secure random source failed: {e}") from e
    return SEPARATOR.join(_split_words(value, count))


def is_number(s: str) -> bool:
    if s.startswith(HEX_PREFIX):
        return all(c in HEX_DIGITS for c in s[len(HEX_PREFIX):].lower())
    return all(c in DECIMAL_DIGITS for c in s)


def leading_zeros(s: str) -> tuple[int, str]:
    """Split numeral text into (suppressed zero count, remaining numeral).

    The remaining numeral keeps the "0x" prefix when one was given. An
    all-zero numeral keeps its final zero as the value, so "000" becomes
    (2, "0").
    """
    prefix = ""
    if s.startswith(HEX_PREFIX):
        prefix, s = HEX_PREFIX, s[len(HEX_PREFIX):]
    stripped = s.lstrip("0")
    if s and not stripped:
        stripped = "0"
    return len(s) - len(stripped), prefix + stripped


def parse_number(s: str) -> tuple[int, int]:
    """Parse numeral text into (value, leading zero count)."""
    count, numeral = leading_zeros(s)
    if numeral.startswith(HEX_PREFIX):
        digits, base = numeral[len(HEX_PREFIX):], 16
    else:
        digits, base = numeral, 10
    if not digits:
        raise ValueError(f"cannot parse {s!r} as a number")
    return int(digits, base), count


def to_phrase(text: str) -> str:
    """Encode numeral text as a phrase, or decode a phrase to decimal text."""
    if is_number(text):
        value, count = parse_number(text)
        return encode(value, count)
    return decode(text)


__all__ = [
    "CONSONANTS",
    "VOWELS",
    "ZERO_TOKEN",
    "encode_word",
    "decode_token",
    "is_valid_token",
    "proquint_words",
    "encode",
    "decode",
    "random_phrase",
    "is_number",
    "leading_zeros",
    "parse_number",
    "to_phrase",
]
