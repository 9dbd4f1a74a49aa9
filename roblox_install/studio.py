from __future__ import annotations
import os
import pathlib
from typing import Mapping, Optional

from .errors import EnvironmentVariableError
from .folders import KnownFolders
from .installs import StudioInstall
from .platforms import HOST, Platform
from .reglib import Registry
from .strategies import strategy_for


ENV_VAR = 'ROBLOX_STUDIO_PATH'


def path_from_env(environ: Mapping[str, str], name: str) -> Optional[pathlib.Path]:
    """ The absolute directory in environment variable name, or None if it is unset. """

    value = environ.get(name)

    if value is None:
        return None

    if not value:
        raise EnvironmentVariableError(name, 'It is set, but empty.')

    try:
        # os.environ surfaces undecodable bytes as lone surrogates.
        value.encode('utf-8')
    except UnicodeEncodeError as err:
        raise EnvironmentVariableError(name, f'It is not valid Unicode: {err}') from err

    if '\0' in value:
        raise EnvironmentVariableError(name, 'It contains a null character.')

    path = pathlib.Path(value)

    if not path.is_absolute():
        raise EnvironmentVariableError(name, f'It is not an absolute path.  Got: {value!r}')

    return path


class StudioLocator:

    def __init__(
        self,
        platform: Optional[Platform] = None,
        environ: Optional[Mapping[str, str]] = None,
        registry: Optional[Registry] = None,
        folders: Optional[KnownFolders] = None,
        ):
        self.platform = platform or HOST
        self.environ = os.environ if environ is None else environ
        self.strategy = strategy_for(self.platform, registry = registry, folders = folders)

    def locate(self) -> StudioInstall:
        """ Uses ROBLOX_STUDIO_PATH if it is set, otherwise looks
            where Studio's installer puts it on this platform.
            The two are never combined.
        """
        install = self.locate_from_env()
        if install is not None:
            return install
        return self.locate_target_specific()

    def locate_from_env(self) -> Optional[StudioInstall]:
        root = path_from_env(self.environ, ENV_VAR)
        if root is None:
            return None
        return self.locate_from_directory(root)

    def locate_from_directory(self, root: pathlib.Path | str) -> StudioInstall:
        return self.strategy.locate_studio_from_directory(pathlib.Path(root))

    def locate_target_specific(self) -> StudioInstall:
        return self.strategy.locate_studio()


def locate_studio() -> StudioInstall:
    return StudioLocator().locate()
