""" Platform specific ways of finding Roblox installations.

    Exactly one strategy applies to a process, chosen by strategy_for
    from the Platform the process runs on.
"""

from __future__ import annotations
import abc
import pathlib
from typing import Optional, Type

from . import directories
from .errors import (DocumentsDirectoryNotFound, MalformedRegistry,
                     PlatformNotSupported, PluginsDirectoryNotFound,
                     RegistryError)
from .folders import KnownFolders
from .installs import PlayerInstall, StudioInstall
from .platforms import Platform
from .reglib import Registry, Root, WinRegistry


class PlatformStrategy(abc.ABC):

    platform: Platform

    def __init__(
        self,
        registry: Optional[Registry] = None,
        folders: Optional[KnownFolders] = None,
        ):
        self.registry = registry
        self.folders = folders or KnownFolders()

    @abc.abstractmethod
    def locate_studio(self) -> StudioInstall:
        """ Finds Studio without any hint from the user. """

    @abc.abstractmethod
    def locate_studio_from_directory(self, root: pathlib.Path) -> StudioInstall:
        """ Finds Studio inside a directory chosen by the user. """

    def locate_player(self) -> PlayerInstall:
        raise PlatformNotSupported(self.platform)


class WindowsStrategy(PlatformStrategy):

    platform = Platform.WINDOWS

    registry_root = Root.HKCU

    studio_key = r'Software\Roblox\RobloxStudio'
    studio_value = 'ContentFolder'

    player_key = r'Software\ROBLOX Corporation\Environments\roblox-player'
    player_value = 'clientExe'

    application_name = 'RobloxStudioBeta.exe'

    def __init__(
        self,
        registry: Optional[Registry] = None,
        folders: Optional[KnownFolders] = None,
        ):
        super().__init__(registry or WinRegistry(), folders)

    def _read_registry_path(self, rel_key: str, name: str) -> tuple[pathlib.Path, pathlib.Path]:
        """ The path stored in value name of rel_key, and its parent directory. """

        key_name = f'{self.registry_root.name}\\{rel_key}'

        try:
            data = self.registry.read_string(self.registry_root, rel_key, name)
        except OSError as err:
            raise RegistryError(key_name, name) from err

        path = pathlib.Path(data)

        # A filesystem root is its own parent.
        if path.parent == path:
            raise MalformedRegistry(key_name, name, data)

        return path, path.parent

    def plugins_dir(self) -> pathlib.Path:
        home = self.folders.home()
        if home is None:
            raise PluginsDirectoryNotFound()
        return home / 'AppData' / 'Local' / 'Roblox' / 'Plugins'

    def _studio_install(
        self,
        root: pathlib.Path,
        content: pathlib.Path,
        ) -> StudioInstall:
        return StudioInstall(
            content = content,
            application = root / self.application_name,
            built_in_plugins = root / 'BuiltInPlugins',
            plugins = self.plugins_dir(),
            root = root,
            )

    def locate_studio(self) -> StudioInstall:
        content, root = self._read_registry_path(self.studio_key, self.studio_value)
        return self._studio_install(root, content)

    def locate_studio_from_directory(self, root: pathlib.Path) -> StudioInstall:
        root = pathlib.Path(root)

        if directories.is_unversioned_install(root):
            version_dir = root
        else:
            version_dir = directories.first_versioned_install(root, self.application_name)

        return self._studio_install(version_dir, version_dir / directories.CONTENT_DIR_NAME)

    def locate_player(self) -> PlayerInstall:
        application, root = self._read_registry_path(self.player_key, self.player_value)
        return PlayerInstall(
            content = root / directories.CONTENT_DIR_NAME,
            application = application,
            root = root,
            )


class MacStrategy(PlatformStrategy):

    platform = Platform.MAC

    bundle = pathlib.Path('/Applications/RobloxStudio.app')

    def plugins_dir(self) -> pathlib.Path:
        documents = self.folders.documents()
        if documents is None:
            raise DocumentsDirectoryNotFound()
        return documents / 'Roblox' / 'Plugins'

    def locate_studio(self) -> StudioInstall:
        return self.locate_studio_from_directory(self.bundle)

    def locate_studio_from_directory(self, root: pathlib.Path) -> StudioInstall:
        # Nothing is checked for existence.  The bundle layout is fixed.
        contents = pathlib.Path(root) / 'Contents'
        return StudioInstall(
            content = contents / 'Resources' / 'content',
            application = contents / 'MacOS' / 'RobloxStudio',
            built_in_plugins = contents / 'Resources' / 'BuiltInPlugins',
            plugins = self.plugins_dir(),
            root = pathlib.Path(root),
            )


class UnsupportedStrategy(PlatformStrategy):

    platform = Platform.OTHER

    def locate_studio(self) -> StudioInstall:
        raise PlatformNotSupported(self.platform)

    def locate_studio_from_directory(self, root: pathlib.Path) -> StudioInstall:
        raise PlatformNotSupported(self.platform)


STRATEGIES: dict[Platform, Type[PlatformStrategy]] = {
    Platform.WINDOWS: WindowsStrategy,
    Platform.MAC: MacStrategy,
    Platform.OTHER: UnsupportedStrategy,
    }


def strategy_for(
    platform: Platform,
    registry: Optional[Registry] = None,
    folders: Optional[KnownFolders] = None,
    ) -> PlatformStrategy:
    return STRATEGIES[platform](registry = registry, folders = folders)
