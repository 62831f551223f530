"""Helpers for breaking repeated-key XOR: candidate keys, word lists and dictionaries."""

from __future__ import annotations

from itertools import cycle, product
from pathlib import Path
from typing import Iterable, Iterator, Union

KEY_CHARACTERS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_CHARACTERS = len(KEY_CHARACTERS)
MAX_WORDS = 100
MAX_WORD_LENGTH = 39
DICTIONARY_LINE_LENGTH = 39
KEY_LINE_LENGTH = 255

# Alphanumeric, whitespace or punctuation bytes in the C locale.
_VALID_BYTES = frozenset(range(9, 14)) | frozenset(range(32, 127))
_EOF_BYTE = b"\xff"

Data = Union[bytes, bytearray, str]


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogateescape")
    return bytes(data)


def _c_string(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="surrogateescape")


def _lines(data: bytes, limit: int) -> Iterator[bytes]:
    """Split data the way repeated bounded line reads do, dropping newlines.

    A line longer than limit characters comes out in several pieces.
    """
    pos = 0
    while pos < len(data):
        newline = data.find(b"\n", pos, pos + limit)
        end = min(pos + limit, len(data)) if newline == -1 else newline + 1
        yield _c_string(data[pos:end].split(b"\n", 1)[0])
        pos = end


def is_valid_char(c: int | str) -> bool:
    """Whether a byte is alphanumeric, whitespace or punctuation."""
    if isinstance(c, str):
        c = ord(c)
    return c in _VALID_BYTES


def admissible_key_chars(cipher: Data, key_length: int) -> list[str]:
    """For each key position, the key characters that decrypt it to valid text.

    Only the cipher text up to its first zero byte is considered.
    """
    if key_length < 1:
        raise ValueError("key length must be at least 1")
    data = _c_string(_to_bytes(cipher))
    return [
        "".join(
            ch
            for ch in KEY_CHARACTERS
            if all(is_valid_char(ord(ch) ^ byte) for byte in data[position::key_length])
        )
        for position in range(key_length)
    ]


def cartesian_keys(sets: Iterable[str]) -> Iterator[str]:
    """Every key taking one character from each position's set, in order."""
    for combination in product(*sets):
        yield "".join(combination)


def xor_cycle(message: Data, key: Data) -> bytes:
    """XOR every byte of the message with the repeated key."""
    key_bytes = _c_string(_to_bytes(key))
    if not key_bytes:
        raise ValueError("xor key must not be empty")
    return bytes(b ^ k for b, k in zip(_to_bytes(message), cycle(key_bytes)))


def xor_file(text_path: str | Path, destination: str | Path, key: Data) -> int:
    """XOR a file with the repeated key into destination, ending it with a zero byte.

    Reading stops at the first 0xFF byte. An empty key copies the text.
    Returns the number of bytes processed.
    """
    data = Path(text_path).read_bytes().split(_EOF_BYTE, 1)[0]
    key_bytes = _c_string(_to_bytes(key)) or b"\0"
    Path(destination).write_bytes(xor_cycle(data, key_bytes) + b"\0")
    return len(data)


def search_in_dictionary(word: Data, dictionary: str | Path) -> bool:
    """Whether word is one of the dictionary's lines."""
    target = _c_string(_to_bytes(word))
    data = Path(dictionary).read_bytes()
    return any(line == target for line in _lines(data, DICTIONARY_LINE_LENGTH))


def text_to_words(path: str | Path) -> list[str]:
    """The first hundred whitespace-separated words of a file, lower-cased.

    Words longer than 39 characters are split into several words.
    """
    words: list[str] = []
    for token in Path(path).read_bytes().split():
        for start in range(0, len(token), MAX_WORD_LENGTH):
            if len(words) == MAX_WORDS:
                return words
            piece = token[start:start + MAX_WORD_LENGTH]
            words.append(_decode(_c_string(piece).lower()))
    return words


def read_keys(path: str | Path) -> list[str]:
    """The keys of a file, one per line, without their newlines."""
    data = Path(path).read_bytes()
    return [_decode(line) for line in _lines(data, KEY_LINE_LENGTH)]