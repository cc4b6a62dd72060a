#!/usr/bin/env python3
"""
Command-line entry point.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

from ezfuck.cli import main


def _write(tmp_path, code, name="prog.ez"):
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return str(path)


def test_runs_file(tmp_path, capsys):
    assert main([_write(tmp_path, "^65 .")]) == 0
    assert capsys.readouterr().out == "A"


def test_dump(tmp_path, capsys):
    assert main([_write(tmp_path, "^65[.]"), "--dump"]) == 0
    assert capsys.readouterr().out == "0: cell = 65\n1: jump to 3 if cell == 0\n2: print\n3: jump to 1 if cell != 0\n"


def test_file_breakpoints_enabled(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("+1\n!\n"))
    assert main([_write(tmp_path, "^63!+1.")]) == 0
    out = capsys.readouterr().out
    assert "EZ> " in out
    assert out.endswith("A")


def test_no_debug_flag(tmp_path, capsys):
    assert main([_write(tmp_path, "^65!."), "--no-debug"]) == 0
    assert capsys.readouterr().out == "A"


def test_compile_error_exit_status(tmp_path, capsys):
    assert main([_write(tmp_path, "[")]) == 1
    assert "CompileError" in capsys.readouterr().err


def test_runtime_error_exit_status(tmp_path, capsys):
    assert main([_write(tmp_path, "^66.<")]) == 1
    captured = capsys.readouterr()
    assert captured.out == "B"
    assert "RuntimeError" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ez")]) == 1
    assert "Couldn't read" in capsys.readouterr().err


def test_trace(tmp_path, capsys):
    assert main([_write(tmp_path, "+"), "--trace"]) == 0
    assert "ip=0 cell_ptr=0 cell=0 add 1" in capsys.readouterr().err


def test_session_without_path(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("^66.\n!\n"))
    assert main([]) == 0
    assert "Output: B" in capsys.readouterr().out


def test_read_takes_one_byte(tmp_path, capsysbinary, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\xff"), encoding="utf-8"))
    assert main([_write(tmp_path, ",.")]) == 0
    assert capsysbinary.readouterr().out == b"\xff"


def test_multibyte_input_read_byte_by_byte(tmp_path, capsysbinary, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO("€".encode("utf-8")), encoding="utf-8"))
    assert main([_write(tmp_path, ",.,.,.")]) == 0
    assert capsysbinary.readouterr().out == b"\xe2\x82\xac"


def test_program_file_not_utf8(tmp_path, capsys):
    path = tmp_path / "latin.ez"
    path.write_bytes(b"caf\xe9: ^65.")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "A"
