"""Rank candidate XOR keys by comparing letter frequencies with a language."""

from __future__ import annotations

import math
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from cryptolab.key_candidates import xor_cycle

ALPHABET_SIZE = 26
CIPHER_FILE = "message_crypte.txt"
KEYS_FILE = "clefs_candidates_c1.txt"
OUTPUT_FILE = "clefs_candidates_c2.txt"
_KEY_LINE_LIMIT = 99

FRENCH_FREQUENCIES = (
    14.715, 1.044, 3.183, 3.669, 17.194, 1.066, 0.866, 0.737, 7.529,
    0.613, 0.049, 5.456, 2.968, 7.095, 5.796, 2.521, 1.362, 6.553,
    7.948, 7.244, 6.311, 1.838, 0.049, 0.427, 0.128, 0.326,
)
ENGLISH_FREQUENCIES = (
    8.167, 1.492, 2.782, 4.253, 12.702, 2.228, 2.015, 6.094, 6.966,
    0.153, 0.772, 4.025, 2.406, 6.749, 7.507, 1.929, 0.095, 5.987,
    6.327, 9.056, 2.758, 0.978, 2.360, 0.150, 1.974, 0.074,
)
LANGUAGES = {"francais": FRENCH_FREQUENCIES, "anglais": ENGLISH_FREQUENCIES}

Data = Union[bytes, bytearray, str]


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogateescape")
    return bytes(data)


def _c_string(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def letter_frequencies(text: Data) -> list[float]:
    """Percentage of each letter a-z among the letters of text, case ignored.

    The text is read up to its first zero character.
    """
    counts = [0] * ALPHABET_SIZE
    for byte in _c_string(_to_bytes(text)):
        if 0x61 <= byte <= 0x7A:
            counts[byte - 0x61] += 1
        elif 0x41 <= byte <= 0x5A:
            counts[byte - 0x41] += 1
    total = sum(counts)
    if total == 0:
        return [0.0] * ALPHABET_SIZE
    return [count / total * 100.0 for count in counts]


def decrypt_xor(ciphertext: Data, key: Data) -> bytes:
    """XOR the cipher text, up to its first zero byte, with the repeated key."""
    return xor_cycle(_c_string(_to_bytes(ciphertext)), key)


def frequency_distance(freq1: Sequence[float], freq2: Sequence[float]) -> float:
    """Euclidean distance between two letter distributions."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(freq1, freq2)))


def best_key(ciphertext: Data, keys: Iterable[str], language: str) -> Optional[str]:
    """The key whose decryption is closest to the language, first one on ties."""
    try:
        reference = LANGUAGES[language]
    except KeyError:
        raise ValueError(
            "seul le français et l'anglais sont disponibles"
        ) from None
    best: Optional[str] = None
    best_distance = math.inf
    for key in keys:
        plain = decrypt_xor(ciphertext, key)
        distance = frequency_distance(letter_frequencies(plain), reference)
        if distance < best_distance:
            best_distance = distance
            best = key
    return best


def _read_key_lines(path: Path) -> list[str]:
    data = path.read_bytes()
    keys = []
    pos = 0
    while pos < len(data):
        newline = data.find(b"\n", pos, pos + _KEY_LINE_LIMIT)
        end = min(pos + _KEY_LINE_LIMIT, len(data)) if newline == -1 else newline + 1
        piece = data[pos:end].split(b"\n", 1)[0]
        if piece:
            keys.append(_c_string(piece).decode("utf-8", errors="surrogateescape"))
        pos = end
    return keys


def main(argv: list[str] | None = None) -> int:
    """Command entry point: <langue_choisie>, francais or anglais."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: break_code2 <langue_choisie>", file=sys.stderr)
        return 1
    language = args[0]
    if language not in LANGUAGES:
        print(
            "Problème rencontré lors du choix de la langue : "
            "seul le français et l'anglais sont disponibles.",
            file=sys.stderr,
        )
        return 1
    try:
        ciphertext = Path(CIPHER_FILE).read_bytes()
    except OSError as exc:
        print(f"Erreur d'ouverture de fichier: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        keys = _read_key_lines(Path(KEYS_FILE))
    except OSError as exc:
        print(f"Erreur d'ouverture du fichier de clés: {exc.strerror}", file=sys.stderr)
        return 1

    best = best_key(ciphertext, keys, language)
    with open(OUTPUT_FILE, "w", encoding="utf-8", errors="surrogateescape") as output:
        output.writelines(f"{key}\n" for key in keys)
        if best is None:
            output.write("\nAucune clé valide trouvée.\n")
    if best is not None:
        print(f"La meilleure clé est : {best}")
    return 0


if __name__ == "__main__":
    sys.exit(main())