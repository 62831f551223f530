from pathlib import Path

import pytest

from cryptolab.break_code3 import main, score_keys
from cryptolab.key_candidates import xor_cycle

PLAIN = b"hello world foo"


@pytest.fixture
def setup(tmp_path):
    cipher = tmp_path / "cipher.txt"
    cipher.write_bytes(xor_cycle(PLAIN, b"ab"))
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("hello\nworld\n")
    return cipher, dictionary


def test_real_key_ranks_first(setup, tmp_path):
    cipher, dictionary = setup
    ranked = score_keys(["zz", "ab"], dictionary, cipher, tmp_path / "work.txt")
    entries = list(ranked)
    assert len(ranked) == 2
    assert entries[0].key == "ab"
    assert entries[0].score == 2
    assert entries[0].score >= entries[1].score


def test_work_file_holds_decryption(setup, tmp_path):
    cipher, dictionary = setup
    work = tmp_path / "work.txt"
    score_keys(["ab"], dictionary, cipher, work)
    assert work.read_bytes() == PLAIN + b"\0"


def test_missing_dictionary(setup, tmp_path):
    cipher, _ = setup
    with pytest.raises(FileNotFoundError):
        score_keys(["ab"], tmp_path / "missing.txt", cipher, tmp_path / "work.txt")


def test_no_keys_gives_empty_ranking(setup, tmp_path):
    cipher, dictionary = setup
    assert len(score_keys([], dictionary, cipher, tmp_path / "work.txt")) == 0


def test_main_too_few_arguments():
    assert main(["a", "b"]) == 1


def test_main_missing_keys_file(setup, tmp_path):
    cipher, dictionary = setup
    assert main([str(dictionary), str(cipher), str(tmp_path / "nokeys.txt")]) == 1


def test_main_prints_ranking(setup, tmp_path, monkeypatch, capsys):
    cipher, dictionary = setup
    monkeypatch.chdir(tmp_path)
    keys = tmp_path / "keys.txt"
    keys.write_text("zz\nab\n")
    assert main([str(dictionary), str(cipher), str(keys)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Key: ab, Score: 2"
    assert Path("message.txt").exists()