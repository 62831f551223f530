from pathlib import Path

import pytest

from cryptolab.break_code1 import CANDIDATES_FILE, CIPHER_FILE, break_code1, main
from cryptolab.key_candidates import xor_cycle


def test_cipher_is_repeated_xor(tmp_path):
    cipher, _ = break_code1("Hello world", "ab", tmp_path)
    assert cipher == xor_cycle(b"Hello world", b"ab")
    assert xor_cycle(cipher, b"ab") == b"Hello world"


def test_cipher_file_holds_hex(tmp_path):
    cipher, _ = break_code1("Hello world", "ab", tmp_path)
    content = (tmp_path / CIPHER_FILE).read_text()
    assert content == cipher.hex() + "\n"
    assert bytes.fromhex(content.strip()) == cipher


def test_candidates_contain_real_key(tmp_path):
    _, sets = break_code1("Hello world", "ab", tmp_path)
    lines = (tmp_path / CANDIDATES_FILE).read_text().splitlines()
    assert "ab" in lines
    assert len(sets) == 2
    assert "a" in sets[0] and "b" in sets[1]
    assert len(lines) == len(sets[0]) * len(sets[1])
    assert all(len(line) == 2 for line in lines)


def test_printed_output(tmp_path, capsys):
    break_code1("Hello world", "ab", tmp_path)
    out = capsys.readouterr().out
    assert "Message d'origine : Hello world\n" in out
    assert "Message decrypte : Hello world\n" in out
    assert "clef[0] : [" in out and "clef[1] : [" in out


def test_empty_key_rejected(tmp_path):
    with pytest.raises(ValueError):
        break_code1("Hello", "", tmp_path)


def test_main_wrong_argument_count():
    assert main(["only_one"]) == 1


def test_main_empty_key(tmp_path):
    source = tmp_path / "plain.txt"
    source.write_text("Hello world")
    assert main([str(source), ""]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "ab"]) == 1


def test_main_empty_file(tmp_path):
    source = tmp_path / "plain.txt"
    source.write_text("")
    assert main([str(source), "ab"]) == 1


def test_main_reads_first_line(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("plain.txt").write_text("Hello world\nsecond line\n")
    assert main(["plain.txt", "ab"]) == 0
    hex_text = Path(CIPHER_FILE).read_text().strip()
    assert xor_cycle(bytes.fromhex(hex_text), b"ab") == b"Hello world\n"
    assert "ab" in Path(CANDIDATES_FILE).read_text().splitlines()