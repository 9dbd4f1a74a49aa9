import functools
import json
import pathlib

import pytest

from conftest import FakeKnownFolders, FakeRegistry
from roblox_install import __main__ as cli
from roblox_install.platforms import Platform
from roblox_install.player import PlayerLocator
from roblox_install.reglib import Root
from roblox_install.studio import ENV_VAR, StudioLocator


@pytest.fixture
def mac_studio(monkeypatch: pytest.MonkeyPatch, folders: FakeKnownFolders) -> None:
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.setattr(cli, 'StudioLocator',
                        functools.partial(StudioLocator, platform=Platform.MAC, folders=folders))


@pytest.mark.usefixtures('mac_studio')
def test_studio_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(['studio', '--json']) == 0

    paths = json.loads(capsys.readouterr().out)
    assert paths['root'] == str(pathlib.Path('/Applications/RobloxStudio.app'))
    assert set(paths) == {'content', 'application', 'built_in_plugins', 'plugins', 'root'}


@pytest.mark.usefixtures('mac_studio')
def test_studio_text(capsys: pytest.CaptureFixture[str], tmp_path: pathlib.Path) -> None:
    assert cli.main(['studio', '--directory', str(tmp_path / 'Other.app')]) == 0

    out = capsys.readouterr().out
    assert 'application' in out
    assert str(tmp_path / 'Other.app' / 'Contents' / 'MacOS' / 'RobloxStudio') in out


def test_player(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    registry = FakeRegistry({
        (Root.HKCU, r'Software\ROBLOX Corporation\Environments\roblox-player'):
            {'clientExe': '/Roblox/v1/RobloxPlayerBeta.exe'},
        })
    monkeypatch.setattr(cli, 'PlayerLocator',
                        functools.partial(PlayerLocator, platform=Platform.WINDOWS, registry=registry))

    assert cli.main(['player', '--json']) == 0

    paths = json.loads(capsys.readouterr().out)
    assert paths['root'] == str(pathlib.Path('/Roblox/v1'))


def test_error_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(cli, 'PlayerLocator', functools.partial(PlayerLocator, platform=Platform.OTHER))

    assert cli.main(['player']) == 1

    assert 'not supported' in capsys.readouterr().err


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        cli.main([])
