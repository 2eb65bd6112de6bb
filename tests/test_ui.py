import pytest
from tracegeo import ui
from helpers import FakeLookup, ip


def feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_menu_flow(monkeypatch, capsys):
    lookup = FakeLookup()
    feed(monkeypatch, ["1  8.8.8.8", "2  10.0.0.1", "", "3", "2", "9"])
    ui.run_interactive(lookup)
    out = capsys.readouterr().out
    assert "1  8.8.8.8     # Mountain View - US" in out
    assert "2  10.0.0.1    # Local - " in out
    assert "Hop 1 IP: 8.8.8.8" in out
    assert "City: Local" in out
    assert out.rstrip().endswith("Good bye!")
    assert lookup.calls == [[ip("8.8.8.8")]]


def test_new_input_replaces_previous(monkeypatch, capsys):
    feed(monkeypatch, ["1  8.8.8.8", "", "1", "1  1.1.1.1", "", "2", "9"])
    ui.run_interactive(FakeLookup())
    out = capsys.readouterr().out
    report = out.split("Hop 1 IP:")
    assert len(report) == 2
    assert report[1].startswith(" 1.1.1.1")


def test_unknown_choice_redisplays_menu(monkeypatch, capsys):
    feed(monkeypatch, ["junk", "", "42", "9"])
    ui.run_interactive(FakeLookup())
    out = capsys.readouterr().out
    assert "No IP addresses found in input." in out
    assert out.count("Select display option") == 2
    assert "Good bye!" in out


def test_empty_input_then_eof(monkeypatch, capsys):
    feed(monkeypatch, [])
    ui.run_interactive(FakeLookup())
    out = capsys.readouterr().out
    assert "No input detected" in out
    assert out.rstrip().endswith("Good bye!")


@pytest.mark.parametrize("answers,expected", [
    (["", "short", "abcdefghijklmn"], "abcdefghijklmn"),
    (["  abcdefghijklmn  "], "abcdefghijklmn"),
])
def test_prompt_token(monkeypatch, capsys, answers, expected):
    feed(monkeypatch, answers)
    assert ui.prompt_token() == expected
