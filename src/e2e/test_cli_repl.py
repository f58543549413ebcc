import json
import pytest
from search_engine.__main__ import main


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_single_query(capsys):
    assert main(["--q", "fox"]) == 0
    assert capsys.readouterr().out.strip() == "Result:[document1, document3]"


def test_json_output(capsys):
    assert main(["--q", "corner", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["label"] for r in rows] == ["document2"]


def test_repl_until_exit_command(monkeypatch, capsys):
    _feed(monkeypatch, ["corner", "zebra", "q", "fox"])
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Result:[document2]", "Result:[]", "Exit!"]


def test_repl_stops_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, ["the"])
    assert main(["--repl"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Result:[document3, document1, document2]"]


def test_missing_root_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--roots", str(tmp_path / "missing"), "--q", "fox"])
    assert exc.value.code == 2
