from math import prod

import pytest

from cryptolab.key_candidates import (
    KEY_CHARACTERS,
    admissible_key_chars,
    cartesian_keys,
    is_valid_char,
    read_keys,
    search_in_dictionary,
    text_to_words,
    xor_cycle,
    xor_file,
)

PLAIN = b"Bonjour tout le monde, ceci est un message secret."


def test_is_valid_char_printable_and_control():
    assert is_valid_char("a")
    assert is_valid_char(" ")
    assert is_valid_char("\t")
    assert not is_valid_char(0)
    assert not is_valid_char(0x7F)


@pytest.mark.parametrize("ch", list(KEY_CHARACTERS))
def test_key_characters_are_valid(ch):
    assert is_valid_char(ch)


def test_xor_cycle_round_trip():
    encrypted = xor_cycle(PLAIN, "abc")
    assert encrypted != PLAIN
    assert xor_cycle(encrypted, "abc") == PLAIN


def test_xor_cycle_empty_key():
    with pytest.raises(ValueError):
        xor_cycle(PLAIN, "")


def test_admissible_contains_true_key():
    key = "k3Y"
    cipher = xor_cycle(PLAIN, key)
    sets = admissible_key_chars(cipher, len(key))
    assert len(sets) == len(key)
    for position, ch in enumerate(key):
        assert ch in sets[position]


def test_admissible_chars_decrypt_to_valid_text():
    cipher = xor_cycle(PLAIN, "Zq")
    sets = admissible_key_chars(cipher, 2)
    for position, chars in enumerate(sets):
        for ch in chars:
            assert all(is_valid_char(ord(ch) ^ b) for b in cipher[position::2])


def test_admissible_positions_beyond_text_allow_everything():
    sets = admissible_key_chars(b"ab", 4)
    assert sets[2] == KEY_CHARACTERS
    assert sets[3] == KEY_CHARACTERS


def test_admissible_rejects_bad_length():
    with pytest.raises(ValueError):
        admissible_key_chars(b"abc", 0)


def test_cartesian_keys_order_and_size():
    sets = ["ab", "c", "de"]
    keys = list(cartesian_keys(sets))
    assert len(keys) == prod(len(s) for s in sets)
    assert keys[0] == "acd"
    assert keys[-1] == "bce"
    assert len(set(keys)) == len(keys)


def test_cartesian_keys_empty_set_gives_nothing():
    assert list(cartesian_keys(["ab", ""])) == []


def test_cartesian_keys_no_positions_gives_empty_key():
    assert list(cartesian_keys([])) == [""]


def test_xor_file_appends_zero_byte(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(PLAIN)
    assert xor_file(source, target, "key") == len(PLAIN)
    out = target.read_bytes()
    assert out[:-1] == xor_cycle(PLAIN, "key")
    assert out[-1:] == b"\0"


def test_xor_file_stops_at_ff_byte(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(b"ab\xffcd")
    assert xor_file(source, target, "k") == 2
    assert len(target.read_bytes()) == 3


def test_xor_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        xor_file(tmp_path / "missing.txt", tmp_path / "out.txt", "k")


def test_search_in_dictionary(tmp_path):
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("test\nword\ntestmessage\n")
    assert search_in_dictionary("testmessage", dictionary)
    assert search_in_dictionary("word", dictionary)
    assert not search_in_dictionary("other", dictionary)


def test_search_in_dictionary_long_line_is_split(tmp_path):
    long_word = "x" * 50
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text(long_word + "\n")
    assert not search_in_dictionary(long_word, dictionary)
    assert search_in_dictionary(long_word[:39], dictionary)


def test_search_in_missing_dictionary(tmp_path):
    with pytest.raises(FileNotFoundError):
        search_in_dictionary("word", tmp_path / "missing.txt")


def test_text_to_words_lowercases(tmp_path):
    text = tmp_path / "text.txt"
    text.write_text("Hello  WORLD\tFoo\n")
    assert text_to_words(text) == ["hello", "world", "foo"]


def test_text_to_words_limits(tmp_path):
    text = tmp_path / "text.txt"
    text.write_text(" ".join(f"w{i}" for i in range(150)))
    words = text_to_words(text)
    assert len(words) == 100
    assert words[-1] == "w99"


def test_text_to_words_splits_long_tokens(tmp_path):
    text = tmp_path / "text.txt"
    text.write_text("a" * 45)
    words = text_to_words(text)
    assert [len(w) for w in words] == [39, 6]


def test_read_keys(tmp_path):
    keys_file = tmp_path / "keys.txt"
    keys_file.write_text("abc\ndef\nxyz\n")
    assert read_keys(keys_file) == ["abc", "def", "xyz"]


def test_read_keys_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_keys(tmp_path / "missing.txt")