""" Finds local installations of Roblox Studio and the Roblox Player. """

from .errors import (RobloxInstallError, DocumentsDirectoryNotFound,
                     PluginsDirectoryNotFound, RegistryError, MalformedRegistry,
                     PlatformNotSupported, EnvironmentVariableError, NotInstalled)
from .installs import StudioInstall, PlayerInstall
from .platforms import Platform
from .player import PlayerLocator, locate_player
from .studio import ENV_VAR, StudioLocator, locate_studio

__all__ = [
    'RobloxInstallError',
    'DocumentsDirectoryNotFound',
    'PluginsDirectoryNotFound',
    'RegistryError',
    'MalformedRegistry',
    'PlatformNotSupported',
    'EnvironmentVariableError',
    'NotInstalled',
    'StudioInstall',
    'PlayerInstall',
    'Platform',
    'PlayerLocator',
    'StudioLocator',
    'ENV_VAR',
    'locate_player',
    'locate_studio',
]
