import re

from sockdemo.timeinfo import local_time_string, main

CTIME_PATTERN = re.compile(r"^[A-Z][a-z]{2} [A-Z][a-z]{2} [ \d]\d \d{2}:\d{2}:\d{2} \d{4}\n$")


def test_format_matches_ctime_layout():
    result = local_time_string(1_000_000_000)
    assert len(result) == 25
    assert result.endswith("\n")
    assert CTIME_PATTERN.match(result) is not None


def test_year_of_known_timestamp():
    assert local_time_string(1_000_000_000).endswith(" 2001\n")


def test_default_is_current_time():
    result = local_time_string()
    assert len(result) == 25
    parts = result.split()
    assert len(parts) == 5
    assert parts[4].isdigit()
    assert int(parts[4]) >= 2001
    assert CTIME_PATTERN.match(result) is not None


def test_main_prints_time(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("time:")
    assert CTIME_PATTERN.match(out[len("time:"):]) is not None