#!/usr/bin/env python3
"""
Session driver, in-memory API and command line tests.
"""

import sys
import os
import io
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfline import EngineConfig, Session, run_lines
from bfline.cli import main
from bfline.errors import ConfigError


def test_runs_line_and_exits_cleanly():
    result = run_lines("++.\n")
    assert result.exit_status == 0
    assert "\x02" in result.output
    assert result.diagnostics == ""


def test_banner():
    result = run_lines("", banner=True)
    assert result.output.startswith("BrainFuck Interpreter - version : 1.2\nExit: Ctrl + D\n")


def test_prompt_tracks_state_between_lines():
    result = run_lines("+++\n>++\n")
    st = result.state
    assert int(st.tape[0]) == 3
    assert int(st.tape[1]) == 2
    assert result.output.endswith("\n<C:[1] V:[2] BFI> ")


def test_input_shares_stdin_with_lines():
    result = run_lines(",\nX\n.\n")
    assert result.exit_status == 0
    assert "X\n<C:[0] V:[88] BFI> " in result.output


def test_exhausted_input_ends_session():
    result = run_lines("+,")
    assert result.exit_status == 0
    assert result.state.cell == 0


def test_fatal_ends_session():
    result = run_lines("+[\n+++\n")
    assert result.exit_status == 1
    assert "Error: missing ']' for '[' at index : 1" in result.diagnostics
    # the second line never runs
    assert result.state.cell == 1


def test_loop_close_without_open_ends_session():
    result = run_lines("+]\n")
    assert result.exit_status == 1
    assert "missing '[' before ']'" in result.diagnostics


def test_warnings_do_not_end_session():
    result = run_lines("-\n+\n")
    assert result.exit_status == 0
    assert result.diagnostics == "Warning: Cell value already at zero\n"
    assert result.state.cell == 1


def test_long_lines_are_split():
    result = run_lines("++++++\n", config=EngineConfig(max_line=4))
    assert result.exit_status == 0
    assert result.state.cell == 6


def test_loop_split_across_chunks_is_fatal():
    result = run_lines("+[-]\n", config=EngineConfig(max_line=3))
    assert result.exit_status == 1


def test_trace_goes_to_diagnostics():
    stderr = io.StringIO()
    session = Session(
        stdin=io.StringIO("+\n"),
        stdout=io.StringIO(),
        stderr=stderr,
        banner=False,
        trace=True,
    )
    assert session.run() == 0
    assert "   0 + C:0 V:1" in stderr.getvalue()


def test_trace_interleaves_with_warnings_and_errors():
    stderr = io.StringIO()
    session = Session(
        stdin=io.StringIO("+--\n+[\n"),
        stdout=io.StringIO(),
        stderr=stderr,
        banner=False,
        trace=True,
    )
    assert session.run() == 1
    lines = stderr.getvalue().splitlines()
    assert lines[:5] == [
        "   0 + C:0 V:1",
        "   1 - C:0 V:0",
        "Warning: Cell value already at zero",
        "   2 - C:0 V:0",
        "   0 + C:0 V:1",
    ]
    assert lines[5].startswith("Error: missing ']' for '[' at index : 1")


def test_undecodable_input_byte_is_clamped():
    stdin = io.TextIOWrapper(io.BytesIO(b",\n\xff\n+\xfe+\n"), encoding="utf-8")
    stderr = io.StringIO()
    session = Session(stdin=stdin, stdout=io.StringIO(), stderr=stderr, banner=False)
    assert session.run() == 0
    # 127 from the clamp, then two increments that both saturate
    assert session.state.cell == 127
    assert "Warning: Input character outside ASCII range, stored as 127" in stderr.getvalue()


def test_config_rejects_small_tape():
    with pytest.raises(ConfigError):
        EngineConfig(cells=100)


def test_cli_rejects_small_tape():
    with pytest.raises(SystemExit) as exc:
        main(["--cells", "100"])
    assert exc.value.code == 2


def test_cli_dump(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("+>++\n"))
    status = main(["--no-banner", "--dump", "8"])
    out = capsys.readouterr().out
    assert status == 0
    assert "1 2 0 0 0 0 0 0" in out
    assert "BrainFuck Interpreter" not in out
