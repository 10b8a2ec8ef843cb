import json

import pytest

from flagwright import __main__ as cli

CONFIG = """\
app_name: demo
short_description: Demo tool
options:
  - {short_id: n, long_id: number, type: int, required: true}
flags:
  - {short_id: v, long_id: verbose}
positionals:
  - {name: file}
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(CONFIG, encoding="UTF-8")
    return path


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_split_arguments():
    assert cli.split_arguments(["-c", "x", "--", "-n", "--", "y"]) == (
        ["-c", "x"],
        ["-n", "--", "y"],
    )
    assert cli.split_arguments(["-c", "x"]) == (["-c", "x"], [])


def test_json_output(config_path, capsys):
    code = cli.main(["-c", str(config_path), "--json", "--", "-n", "5", "-v", "a.txt"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {
        "number": 5,
        "verbose": True,
        "file": "a.txt",
    }


def test_pretty_output(config_path, capsys):
    code = cli.main(["--config", str(config_path), "--", "--number=5", "a.txt"])
    assert code == 0
    out = capsys.readouterr().out
    assert "'number': 5" in out
    assert "'file': 'a.txt'" in out


def test_user_error_exits_with_one(config_path, capsys):
    code = cli.main(["-c", str(config_path), "--", "a.txt"])
    assert code == 1
    assert "Option -n/--number is required but not set." in capsys.readouterr().out


def test_missing_config_option(capsys):
    assert cli.main([]) == 1
    assert "Option -c/--config is required but not set." in capsys.readouterr().out


def test_config_must_exist(tmp_path, capsys):
    missing = tmp_path / "missing.yaml"
    assert cli.main(["-c", str(missing)]) == 1
    assert "does not exist" in capsys.readouterr().out


def test_invalid_log_mode(config_path, capsys):
    assert cli.main(["-c", str(config_path), "--log-mode", "xml"]) == 1
    assert "Value xml is not one of [cli, json]." in capsys.readouterr().out


def test_own_help(capsys):
    assert cli.main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "flagwright - Parse a command line against a declaration file" in out
    assert "--config" in out


def test_forwarded_help(config_path, capsys):
    assert cli.main(["-c", str(config_path), "--", "--help"]) == 0
    assert "demo - Demo tool" in capsys.readouterr().out
