"""Encrypt a message with a repeated XOR key and list the keys that could break it."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Union

from cryptolab.key_candidates import admissible_key_chars, cartesian_keys, xor_cycle

CIPHER_FILE = "message_crypte.txt"
CANDIDATES_FILE = "clefs_candidates_c1.txt"
_LINE_LIMIT = 1023

Data = Union[bytes, bytearray, str]


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogateescape")
    return bytes(data)


def _c_string(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _show(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def break_code1(
    message: Data, key: Data, directory: str | Path | None = None
) -> tuple[bytes, list[str]]:
    """Encrypt message with key, then write the cipher and every candidate key.

    The cipher goes in hexadecimal to message_crypte.txt and the candidate
    keys, one per line, to clefs_candidates_c1.txt, both in directory.
    Returns the cipher and the admissible characters of each key position.
    """
    text = _c_string(_to_bytes(message))
    key_bytes = _c_string(_to_bytes(key))
    if not key_bytes:
        raise ValueError("la clé ne peut pas être vide")
    out = Path(directory) if directory is not None else Path()

    print(f"Message d'origine : {_show(text)}")
    cipher = xor_cycle(text, key_bytes)
    print(f"Message crypte :{cipher.hex()}")
    (out / CIPHER_FILE).write_bytes(cipher.hex().encode("ascii") + b"\n")

    decrypted = xor_cycle(cipher, key_bytes)
    print(f"Message decrypte : {_show(_c_string(decrypted))}")

    sets = admissible_key_chars(cipher, len(key_bytes))
    for position, chars in enumerate(sets):
        print(f"clef[{position}] : [" + "".join(f"{c}, " for c in chars) + "]")

    with open(out / CANDIDATES_FILE, "wb") as candidates:
        for candidate in cartesian_keys(sets):
            candidates.write(candidate.encode("ascii") + b"\n")
    return cipher, sets


def main(argv: list[str] | None = None) -> int:
    """Command entry point: <texte_non_crypte.txt> <cle>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: break_code1 <texte_non_crypte.txt> <cle>", file=sys.stderr)
        return 1
    path, key = args
    if not key:
        print("Erreur : la clé ne peut pas être vide.", file=sys.stderr)
        return 1
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        print(f"Echec d'ouverture du fichier: {exc.strerror}", file=sys.stderr)
        return 1
    if not data:
        print("Echec de lecture du fichier", file=sys.stderr)
        return 1
    line = data[:_LINE_LIMIT]
    newline = line.find(b"\n")
    if newline != -1:
        line = line[: newline + 1]
    break_code1(line, key)
    return 0


if __name__ == "__main__":
    sys.exit(main())