import pytest
from xkcd_fetch import cli
from xkcd_fetch.config import DEFAULT_BASE_URL, Settings, parse_args
from xkcd_fetch.errors import NetworkError
from xkcd_fetch.models import OutputFormat

def test_parse_args_defaults(monkeypatch):
    for var in ("XKCD_TIMEOUT", "XKCD_OUTPUT", "XKCD_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    assert parse_args([]) == Settings(timeout=30, output=OutputFormat.TEXT, num=None, save=False,
                                      base_url=DEFAULT_BASE_URL)

def test_parse_args_short_flags():
    s = parse_args(["-t", "5", "-o", "json", "-n", "500", "-s"])
    assert (s.timeout, s.output, s.num, s.save) == (5, OutputFormat.JSON, 500, True)

def test_parse_args_env_defaults(monkeypatch):
    monkeypatch.setenv("XKCD_TIMEOUT", "12")
    monkeypatch.setenv("XKCD_OUTPUT", "json")
    monkeypatch.setenv("XKCD_BASE_URL", "http://localhost:8080")
    s = parse_args([])
    assert (s.timeout, s.output, s.base_url) == (12, OutputFormat.JSON, "http://localhost:8080")
    assert parse_args(["--timeout", "3"]).timeout == 3

@pytest.mark.parametrize("argv", [["-n", "-1"], ["-t", "abc"], ["-o", "xml"]])
def test_parse_args_rejects_bad_values(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 2

def test_main_success(monkeypatch):
    seen = []
    monkeypatch.setattr(cli, "run", lambda settings: seen.append(settings))
    cli.main(["-n", "500"])
    assert seen[0].num == 500

def test_main_reports_errors(monkeypatch, capsys):
    def fail(settings):
        raise NetworkError("GET https://xkcd.com/info.0.json returned HTTP 503")
    monkeypatch.setattr(cli, "run", fail)
    with pytest.raises(SystemExit) as info:
        cli.main([])
    assert info.value.code == 1
    assert capsys.readouterr().err == "Error: GET https://xkcd.com/info.0.json returned HTTP 503\n"

def test_main_interrupted(monkeypatch, capsys):
    def interrupt(settings):
        raise KeyboardInterrupt
    monkeypatch.setattr(cli, "run", interrupt)
    with pytest.raises(SystemExit) as info:
        cli.main([])
    assert info.value.code == 130
    assert "Aborted." in capsys.readouterr().err

def test_main_rejects_malformed_base_url(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--base-url", "http://[::1"])
    assert info.value.code == 1
    assert "Error: invalid base URL" in capsys.readouterr().err
