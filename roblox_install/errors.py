from __future__ import annotations


class RobloxInstallError(Exception):
    """ Base class.  Every failure to locate an installation is one of these. """


class DocumentsDirectoryNotFound(RobloxInstallError):

    def __init__(self):
        super().__init__("Couldn't find the user's Documents directory")


class PluginsDirectoryNotFound(RobloxInstallError):

    def __init__(self):
        super().__init__("Couldn't determine the user's Roblox plugins directory")


class RegistryError(RobloxInstallError):

    def __init__(self, key: str, value_name: str):
        super().__init__(f"Couldn't read value: {value_name} of registry key: {key}")
        self.key = key
        self.value_name = value_name


class MalformedRegistry(RobloxInstallError):

    def __init__(self, key: str, value_name: str, data: str):
        super().__init__(f'Registry value: {value_name} of key: {key} '
                         f'is not inside an install directory. Got: {data=}'
                        )
        self.key = key
        self.value_name = value_name
        self.data = data


class PlatformNotSupported(RobloxInstallError):

    def __init__(self, platform: object):
        super().__init__(f'Locating this installation is not supported on: {platform}')
        self.platform = platform


class EnvironmentVariableError(RobloxInstallError):

    def __init__(self, name: str, detail: str):
        super().__init__(f'Environment variable: {name} is invalid. {detail}')
        self.name = name
        self.detail = detail


class NotInstalled(RobloxInstallError):

    def __init__(self, where: object = None):
        msg = 'Roblox Studio is not installed'
        if where is not None:
            msg = f'{msg} at: {where}'
        super().__init__(msg)
        self.where = where
