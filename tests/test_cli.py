import pytest

from communityapps.cli import create, main, prompt, remove, sync
from communityapps.generator import Generator
from communityapps.manifest import validate_name


def _feeder(answers):
    iterator = iter(answers)
    return lambda _label: next(iterator)


def test_prompt_retries_until_valid(capsys):
    value = prompt("Name", validate_name, _feeder(["cool app", "Cool app", "Cool App"]))
    assert value == "Cool App"
    assert capsys.readouterr().out.count("invalid input") == 2


def test_prompt_propagates_end_of_input():
    def closed(_label):
        raise EOFError

    with pytest.raises(EOFError):
        prompt("Name", validate_name, closed)


def test_create_generates_app(tmp_path):
    apps_dir = tmp_path / "apps"
    apps_dir.mkdir()
    answers = [
        "Cool App",
        "A cool app",
        "A really cool app that does really cool app things.",
        "Tidbyt",
    ]
    app = create(Generator(apps_dir), _feeder(answers))
    assert app.id == "cool-app"
    assert app.file_name == "cool_app.star"
    assert app.package_name == "coolapp"
    assert (apps_dir / "coolapp" / "cool_app.star").is_file()
    assert "from .coolapp import coolapp" in (apps_dir / "apps.py").read_text(
        encoding="utf-8"
    )


def test_remove_deletes_catalogued_app(tmp_path):
    apps_dir = tmp_path / "apps"
    (apps_dir / "tube").mkdir(parents=True)
    app = remove(Generator(apps_dir), "tube")
    assert app.id == "tube"
    assert not (apps_dir / "tube").exists()


def test_remove_unknown_app_raises(tmp_path):
    with pytest.raises(LookupError):
        remove(Generator(tmp_path), "no-such-app")


def test_sync_writes_index(tmp_path):
    apps_dir = tmp_path / "apps"
    (apps_dir / "alpha").mkdir(parents=True)
    sync(Generator(apps_dir))
    assert "from .alpha import alpha" in (apps_dir / "apps.py").read_text(
        encoding="utf-8"
    )


def test_main_sync(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "apps" / "beta").mkdir(parents=True)
    assert main(["sync"]) == 0
    assert "beta" in (tmp_path / "apps" / "apps.py").read_text(encoding="utf-8")


def test_main_sync_without_apps_dir_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["sync"]) == 1
    assert "app deletion failed" in capsys.readouterr().out


def test_main_remove_unknown_id_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["remove", "--id", "no-such-app"]) == 1
    assert "app creation failed" in capsys.readouterr().out


def test_main_remove_known_id(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "apps" / "tube").mkdir(parents=True)
    assert main(["remove", "-i", "tube"]) == 0
    assert not (tmp_path / "apps" / "tube").exists()


def test_main_remove_requires_id():
    with pytest.raises(SystemExit) as excinfo:
        main(["remove"])
    assert excinfo.value.code == 2


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "community-tools" in capsys.readouterr().out