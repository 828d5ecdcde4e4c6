import pytest

from roster import main as main_module
from roster.domain import Student
from roster.persistence import load


def test_main_runs_menu_and_saves(tmp_path, monkeypatch):
    path = str(tmp_path / "roster.txt")
    inputs = iter(["1", "1", "Ann", "2", "4", "", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    monkeypatch.setattr(main_module, "configure_logging", lambda config: None)

    main_module.main(["--file", path])

    assert load(path) == [Student(id=1, name="Ann", courses=[2])]


def test_main_exits_cleanly_on_end_of_input(monkeypatch):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    monkeypatch.setattr(main_module, "configure_logging", lambda config: None)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])
    assert excinfo.value.code == 0
