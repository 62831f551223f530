"""Score candidate XOR keys by counting decrypted words found in a dictionary."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from cryptolab.key_candidates import read_keys, search_in_dictionary, text_to_words, xor_file
from cryptolab.ranking import RankedKeys

WORK_FILE = "message.txt"


def score_keys(
    keys: Iterable[str],
    dictionary: str | Path,
    text_path: str | Path,
    work_path: str | Path = WORK_FILE,
) -> RankedKeys:
    """Decrypt text_path with each key and rank the keys by dictionary words found.

    Each decryption is written to work_path; only its first hundred words count.
    """
    ranked = RankedKeys()
    for key in keys:
        xor_file(text_path, work_path, key)
        words = text_to_words(work_path)
        score = sum(search_in_dictionary(word, dictionary) for word in words)
        ranked.add(key, score)
    return ranked


def main(argv: list[str] | None = None) -> int:
    """Command entry point: <dictionnaire.txt> <message_crypte.txt> <clefs_candidates_c2.txt>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print(
            "Usage: break_code3 <dictionnaire.txt> <message_crypte.txt> "
            "<clefs_candidates_c2.txt>"
        )
        return 1
    dictionary, text, keys_file = args[:3]
    try:
        keys = read_keys(keys_file)
    except OSError:
        print(f"Erreur : Impossible d'ouvrir le fichier des clés '{keys_file}'.")
        return 1
    try:
        ranked = score_keys(keys, dictionary, text)
    except OSError as exc:
        print(f"Error : Can't open file '{exc.filename}'.")
        return 1
    print(ranked.render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())