import pathlib
from typing import Optional

import pytest

from roblox_install.folders import KnownFolders
from roblox_install.reglib import CaseInsensitiveDict, Registry, RegistryReadError, Root


class FakeRegistry(Registry):
    """ In memory registry: {(root, rel_key): {value_name: data}}. """

    def __init__(self, keys: Optional[dict[tuple[Root, str], dict[str, str]]] = None):
        self.keys = {(root, rel_key.lower()): CaseInsensitiveDict(values.items())
                     for (root, rel_key), values in (keys or {}).items()
                    }
        self.reads: list[tuple[Root, str, str]] = []

    def read_string(self, root: Root, rel_key: str, name: str) -> str:
        self.reads.append((root, rel_key, name))
        try:
            values = self.keys[(root, rel_key.lower())]
        except KeyError:
            raise RegistryReadError(f'No key: {root.name}\\{rel_key}') from None
        if name not in values:
            raise RegistryReadError(f'No value: {name} in: {root.name}\\{rel_key}')
        return values[name]


class FakeKnownFolders(KnownFolders):

    def __init__(
        self,
        home: Optional[pathlib.Path] = None,
        documents: Optional[pathlib.Path] = None,
        ):
        self._home = home
        self._documents = documents

    def home(self) -> Optional[pathlib.Path]:
        return self._home

    def documents(self) -> Optional[pathlib.Path]:
        return self._documents


@pytest.fixture
def home(tmp_path: pathlib.Path) -> pathlib.Path:
    home = tmp_path / 'home'
    home.mkdir()
    return home


@pytest.fixture
def folders(home: pathlib.Path) -> FakeKnownFolders:
    return FakeKnownFolders(home = home, documents = home / 'Documents')


@pytest.fixture
def no_folders() -> FakeKnownFolders:
    return FakeKnownFolders()


@pytest.fixture
def install_root(tmp_path: pathlib.Path) -> pathlib.Path:
    root = tmp_path / 'Roblox'
    root.mkdir()
    return root
