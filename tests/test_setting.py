import pytest

from lifegrid.setting import Settings, parse_args, usage


def test_defaults_without_arguments():
    settings = parse_args([])
    assert settings == Settings(size=20, scale=20, delay=1000)


@pytest.mark.parametrize(
    "words",
    [
        ["size:7", "scale:9", "delay:250"],
        ["-s:7", "-c:9", "-d:250"],
        ["SIZE:7", "Scale:9", "-D:250"],
    ],
)
def test_long_short_and_mixed_case_keys(words):
    settings = parse_args(words)
    assert (settings.size, settings.scale, settings.delay) == (7, 9, 250)


def test_later_value_wins():
    assert parse_args(["size:5", "-s:8"]).size == 8


def test_unknown_keys_are_ignored():
    assert parse_args(["colour:red", "size:6"]) == Settings(size=6)


def test_leading_integer_is_taken():
    assert parse_args(["delay: 40ms"]).delay == 40


def test_help_prints_usage(capsys):
    settings = parse_args(["-h"])
    captured = capsys.readouterr().out
    assert usage() in captured
    assert settings == Settings()


def test_usage_names_every_option():
    text = usage()
    for key in ("size:integer", "-s:integer", "scale:integer", "-c:integer", "delay:integer", "-d:integer"):
        assert key in text


@pytest.mark.parametrize("words", [["size:abc"], ["scale:"], ["delay"], ["size:0"], ["delay:-5"]])
def test_bad_values_raise(words):
    with pytest.raises(ValueError):
        parse_args(words)


def test_zero_delay_is_allowed():
    assert parse_args(["-d:0"]).delay == 0