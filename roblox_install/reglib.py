from __future__ import annotations
import abc
import contextlib
import enum
import sys
from typing import Any, Iterator, Iterable, Hashable

if sys.platform == 'win32':
    import winreg


class Root(enum.Enum):
    HKCU = 'HKEY_CURRENT_USER'

    @property
    def HKEY_Const(self) -> int:
        return getattr(winreg, self.value)


class CaseInsensitiveDict(dict):
    # Registry value names are case insensitive.

    @staticmethod
    def _lower_if_str(k):
        return k.lower() if isinstance(k, str) else k

    def __init__(self, items: Iterable[tuple[Hashable, Any]] = ()):
        super().__init__((self._lower_if_str(k), v) for k, v in items)

    def __getitem__(self, k: Hashable):
        return super().__getitem__(self._lower_if_str(k))

    def __contains__(self, k: object) -> bool:
        return super().__contains__(self._lower_if_str(k))


class RegistryReadError(OSError):
    pass


class ReadableKey:

    def __init__(self, root: Root, rel_key: str):
        self._root = root
        self._rel_key = rel_key

    @property
    def rel_key(self) -> str:
        return self._rel_key

    @property
    def root(self) -> Root:
        return self._root

    def __str__(self):
        return f'{self.root.name}\\{self.rel_key}'

    @property
    def HKEY_Const(self) -> int:
        return self.root.HKEY_Const

    def _get_handle(self):
        # Caller is responsible for calling .Close().
        return winreg.OpenKey(self.HKEY_Const, self.rel_key, 0, winreg.KEY_READ)

    @contextlib.contextmanager
    def handle(self):
        try:
            handle = self._get_handle()
        except OSError as err:
            raise RegistryReadError(f'Key: {self} does not exist in Registry '
                                    f'or is not readable'
                                   ) from err
        try:
            yield handle
        finally:
            handle.Close()

    def iter_names_data_and_types(self) -> Iterator[tuple[str, Any, int]]:
        with self.handle() as key_handle:
            # winreg.QueryInfoKey returns a triple: (sub keys, values, last modified).
            __, num_name_data_pairs, __ = winreg.QueryInfoKey(key_handle)
            for i in range(num_name_data_pairs):
                yield winreg.EnumValue(key_handle, i)

    def string_value(self, name: str) -> str:
        """ The data of the string value called name, with any
            %VARIABLES% in REG_EXPAND_SZ data expanded.
        """
        typed = CaseInsensitiveDict(
            (name_, (data, type_))
            for name_, data, type_ in self.iter_names_data_and_types()
            )

        if name not in typed:
            raise RegistryReadError(f'Key: {self} has no value named: {name}')

        data, type_ = typed[name]

        if type_ == winreg.REG_EXPAND_SZ:
            return winreg.ExpandEnvironmentStrings(data)

        if type_ != winreg.REG_SZ:
            raise RegistryReadError(f'Value: {name} of key: {self} is not a string. '
                                    f'Got: {data=}, {type_=}'
                                   )
        return data


class Registry(abc.ABC):
    """ Read only access to named string values of registry keys. """

    @abc.abstractmethod
    def read_string(self, root: Root, rel_key: str, name: str) -> str:
        """ Raises OSError if the key cannot be opened, or it has
            no string value called name.
        """


class WinRegistry(Registry):

    def read_string(self, root: Root, rel_key: str, name: str) -> str:
        return ReadableKey(root, rel_key).string_value(name)
