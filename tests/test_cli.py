import logging
from pathlib import Path

import pytest

from apps.cli import run, solve


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("crane\nslate\ntrace\nbrace\n", encoding="utf-8")
    return str(p)


def _inputs(*lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return fake_input


def test_test_mode_solves(words_file, capsys):
    code = solve.main(["-w", words_file, "-f", "crane", "-t", "trace"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Guess 1: crane (4 candidates)" in out
    assert "Guess 2: trace (2 candidates)" in out
    assert "Solved in 2 rounds." in out


def test_manual_mode_reprompts_then_stops(words_file, capsys):
    code = solve.main(["-w", words_file, "-f", "crane"],
                      input_fn=_inputs("gg", "yggbq", "yggbg", ""))
    captured = capsys.readouterr()
    assert code == 0
    assert "must be 5 characters" in captured.err
    assert "invalid feedback" in captured.err
    assert "Guess 2: trace (2 candidates)" in captured.out
    assert "State: craneyggbg" in captured.out


def test_manual_mode_eof_ends_session(words_file, capsys):
    code = solve.main(["-w", words_file, "-f", "crane"], input_fn=_inputs())
    assert code == 0
    assert "No more feedback" in capsys.readouterr().out


def test_manual_mode_no_candidates(words_file, capsys):
    code = solve.main(["-w", words_file, "-f", "crane"], input_fn=_inputs("bbbbb"))
    assert code == 1
    assert "No possible candidates" in capsys.readouterr().err


def test_resume_state(words_file, capsys):
    code = solve.main(["-w", words_file, "-s", "craneyggbg", "-g", "3"],
                      input_fn=_inputs("ggggg"))
    out = capsys.readouterr().out
    assert code == 0
    assert "Guess 2: trace (2 candidates)" in out


def test_bad_first_word_and_guesses_fall_back(words_file, capsys):
    code = solve.main(["-w", words_file, "-f", "zzzzz", "-g", "nope", "-t", "slate"])
    out = capsys.readouterr().out
    assert code == 0
    # default opening word "reads" is used even if it is not in the word list
    assert "Guess 1: reads (4 candidates)" in out


def test_batch_run_writes_outputs(words_file, tmp_path, capsys):
    outdir = tmp_path / "reports"
    code = run.main(["--words", words_file, "--first", "crane", "--outdir", str(outdir),
                     "--progress", "off"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solved 4/4" in out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1


def test_cli_warnings_use_module_logger(words_file, caplog):
    with caplog.at_level(logging.WARNING, logger="apps.cli.solve"):
        solve.main(["-w", words_file, "-f", "zzzzz", "-t", "nope!"], input_fn=lambda prompt: "")
    names = {r.name for r in caplog.records if r.levelno == logging.WARNING}
    assert names == {"apps.cli.solve"}
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "invalid first word" in messages and "invalid test word" in messages
