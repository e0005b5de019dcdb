import io

import pytest

from toyrsa.cli import BLUE, RESET, caesar_shift, decode_message, main, slow_print


def test_caesar_shift_wraps():
    assert caesar_shift("xyz", 3) == "abc"


def test_caesar_shift_zero_is_identity():
    text = "Hello, World 123!"
    assert caesar_shift(text, 0) == text


@pytest.mark.parametrize("key", range(5))
def test_caesar_shift_round_trip(key):
    text = "The Quick brown FOX, 42 jumps!"
    assert caesar_shift(caesar_shift(text, key), 26 - key) == text


@pytest.mark.parametrize("key", range(5))
def test_caesar_shift_keeps_non_letters(key):
    text = "123 !?.,"
    assert caesar_shift(text, key) == text


def test_slow_print_output():
    buf = io.StringIO()
    slow_print("ab", 0, BLUE, buf)
    assert buf.getvalue() == "  \x1b[34ma  \x1b[34mb" + RESET


@pytest.mark.parametrize("key", range(5))
def test_decode_message_round_trip_without_wrap(key):
    shifted = caesar_shift("hello abc", key)
    assert decode_message(shifted, [ord(c) for c in shifted], key) == "hello abc"


def test_decode_message_does_not_undo_wrap():
    assert decode_message("a", [ord("a")], 1) == "`"


def _run(monkeypatch, capsys, tmp_path, stdin_text):
    key_file = tmp_path / "keys.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    status = main(["--bits", "64", "--fast", "--key-file", str(key_file)])
    return status, capsys.readouterr().out, key_file


def test_main_encrypt_then_decrypt(monkeypatch, capsys, tmp_path):
    status, out, key_file = _run(monkeypatch, capsys, tmp_path, "hello abc\n1\n2\n3\n")
    assert status == 0
    assert out.count("Hexadecimal representation:") == len("hello abc")
    assert "Decrypted Message:\nhello abc\n" in out
    assert "Invalid option!" in out
    content = key_file.read_text()
    assert "Public Key (n, e): (" in content
    assert "Private Key: " in content


def test_main_decrypt_before_encrypt(monkeypatch, capsys, tmp_path):
    status, out, _ = _run(monkeypatch, capsys, tmp_path, "  hi\n2\n3\n")
    assert status == 0
    assert "You have not encrypted  the message yet" in out
    assert "Decrypted Message:" not in out


def test_main_encrypt_twice(monkeypatch, capsys, tmp_path):
    status, out, _ = _run(monkeypatch, capsys, tmp_path, "abc\n1\n1\n3\n")
    assert status == 0
    assert "You have Already encrypted the message" in out
    assert out.count("Hexadecimal representation:") == 3


def test_main_bad_option_then_eof(monkeypatch, capsys, tmp_path):
    status, out, _ = _run(monkeypatch, capsys, tmp_path, "abc\nxyz\n")
    assert status == 0
    assert out.count("Invalid option!") == 1


def test_main_without_message(monkeypatch, capsys, tmp_path):
    status, _, key_file = _run(monkeypatch, capsys, tmp_path, "\n   \n")
    assert status == 1
    assert not key_file.exists()