from __future__ import annotations

import io
import json

import pytest

from keyrank.cli import PROMPT, main


@pytest.fixture(autouse=True)
def no_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WINDOW_SIZE", "TOP_N", "ITERATIONS", "DAMPING_FACTOR", "TOKENIZER"):
        monkeypatch.delenv(f"KEYRANK_{name}", raising=False)


def _run(argv, stdin_text: str = "") -> str:
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), out=out)
    assert code == 0
    return out.getvalue()


def test_text_argument_prints_keywords():
    output = _run(["--window", "2", "graph alpha graph beta graph gamma"])

    lines = output.strip().splitlines()
    assert lines[0] == "Extracted Keywords:"
    assert lines[1] == "graph"
    assert set(lines[2:]) == {"alpha", "beta", "gamma"}


def test_prompts_for_a_line_when_no_text_given():
    output = _run([], stdin_text="graph alpha graph beta\nignored second line\n")

    assert output.startswith(PROMPT)
    assert "ignored" not in output
    assert "graph" in output


def test_blank_prompt_input_exits_cleanly():
    output = _run([], stdin_text="   \n")

    assert "No text provided. Exiting." in output
    assert "Extracted Keywords:" not in output


def test_stdin_mode_reads_everything():
    output = _run(["--stdin", "--top-n", "1", "--window", "2"], stdin_text="graph alpha\ngraph beta\ngraph\n")

    assert output.strip().splitlines()[-1] == "graph"


def test_scores_flag_prints_tab_separated_scores():
    output = _run(["--scores", "--window", "1", "alpha beta"])

    assert "alpha\t0.1500" in output
    assert "beta\t0.1500" in output


def test_json_output():
    output = _run(["--json", "--top-n", "2", "--window", "2", "graph alpha graph beta"])

    data = json.loads(output)
    assert [k["keyword"] for k in data["keywords"]] == ["graph", "alpha"]
    assert data["token_count"] == 4
    assert data["node_count"] == 3


def test_punctuation_tokenizer_flag():
    output = _run(["--json", "--tokenizer", "punctuation", "don't/stop"])

    assert [k["keyword"] for k in json.loads(output)["keywords"]] == ["stop"]


@pytest.mark.parametrize("argv", [["--damping", "2", "x"], ["--window", "0", "x"], ["--iterations", "-1", "x"]])
def test_invalid_parameters_exit_with_usage_error(argv, capsys: pytest.CaptureFixture):
    with pytest.raises(SystemExit) as exc:
        main(argv, stdin=io.StringIO(), out=io.StringIO())

    assert exc.value.code == 2
    assert "error" in capsys.readouterr().err
