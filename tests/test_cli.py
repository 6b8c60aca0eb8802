# --------------------------------------------------------------
# File: test_cli.py
# Description: Pruebas de integración de la interfaz de línea de comandos.
# --------------------------------------------------------------

import pytest

from ficrypt import cli
from ficrypt.models import Job
from ficrypt.runner import run


@pytest.fixture
def passphrase(monkeypatch):
    """Sustituye el prompt de getpass por una passphrase fija.

    Returns:
        str: Passphrase que recibirá la CLI.
    """
    monkeypatch.setattr(cli, "getpass", lambda prompt: "abc")
    return "abc"


def test_cli_roundtrip(tmp_path, passphrase):
    """Cifra y descifra un fichero mayor de 128 bytes desde la CLI.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: Las aserciones comparan el fichero recuperado.
    """
    src = tmp_path / "plain.txt"
    enc = tmp_path / "plain.txt.enc"
    dec = tmp_path / "plain.out.txt"
    src.write_bytes(b"Hi\nHello\n" * 50)

    assert cli.main([str(src), str(enc)]) == 0
    assert enc.read_bytes() != src.read_bytes()
    assert (len(enc.read_bytes()) - 16) % 16 == 0

    assert cli.main([str(enc), str(dec), "-d"]) == 0
    assert dec.read_bytes() == src.read_bytes()


def test_cli_decrypts_reference_file(tmp_path, passphrase):
    enc = tmp_path / "hello.enc"
    dec = tmp_path / "hello.txt"
    enc.write_bytes(
        bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff76a17bdc20597637b19f45ee76468586")
    )
    assert cli.main([str(enc), str(dec), "-d"]) == 0
    assert dec.read_bytes() == b"Hello"


def test_cli_missing_input(tmp_path, passphrase, capsys):
    """Comprueba que un fichero inexistente termine con código 1.

    Returns:
        None: Las aserciones revisan código y mensaje de error.
    """
    code = cli.main([str(tmp_path / "nope"), str(tmp_path / "out")])
    assert code == 1
    assert "Error de la aplicación" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_cli_truncated_input_leaves_no_output(tmp_path, passphrase, capsys):
    enc = tmp_path / "short.enc"
    enc.write_bytes(b"\x00" * 10)
    out = tmp_path / "out"
    assert cli.main([str(enc), str(out), "-d"]) == 1
    assert "truncada" in capsys.readouterr().err.lower()
    assert not out.exists()


def test_cli_tampered_file(tmp_path, passphrase, capsys):
    enc = tmp_path / "bad.enc"
    data = bytearray.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff76a17bdc20597637b19f45ee76468586")
    data[15] ^= 0x80
    enc.write_bytes(bytes(data))
    out = tmp_path / "out"
    assert cli.main([str(enc), str(out), "-d"]) == 1
    assert "relleno" in capsys.readouterr().err.lower()
    assert not out.exists()


def test_cli_keyboard_interrupt(tmp_path, monkeypatch):
    def _interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "getpass", _interrupt)
    assert cli.main([str(tmp_path / "a"), str(tmp_path / "b")]) == 130


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert "ficrypt" in capsys.readouterr().out


def test_run_with_fixed_source(tmp_path, fixed_source):
    """Ejecuta un trabajo completo con el IV de referencia.

    Returns:
        None: Las aserciones comparan el fichero cifrado con el vector.
    """
    src = tmp_path / "hello.txt"
    out = tmp_path / "hello.enc"
    src.write_bytes(b"Hello")
    job = Job(file=src, output_file=out, encrypt=True, key="abc")
    written = run(job, random_source=fixed_source)
    assert written == 32
    assert out.read_bytes().hex() == (
        "f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff76a17bdc20597637b19f45ee76468586"
    )


def test_cli_unknown_log_level(tmp_path, passphrase, monkeypatch, capsys):
    """Comprueba que un nivel de log inválido se informe sin traza.

    Returns:
        None: Las aserciones revisan código y mensaje de error.
    """
    monkeypatch.setattr(cli.config, "LOG_LEVEL", "LOUD")
    code = cli.main([str(tmp_path / "a"), str(tmp_path / "b")])
    assert code == 1
    err = capsys.readouterr().err
    assert "Error de la aplicación" in err
    assert "LOUD" in err


def test_cli_closed_stdin(tmp_path, monkeypatch, capsys):
    def _eof(prompt):
        raise EOFError

    monkeypatch.setattr(cli, "getpass", _eof)
    assert cli.main([str(tmp_path / "a"), str(tmp_path / "b")]) == 1
    assert "Error de la aplicación" in capsys.readouterr().err
    assert not (tmp_path / "b").exists()
