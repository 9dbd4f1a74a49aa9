from __future__ import annotations
import enum
import sys
from typing import Self


class Platform(enum.Enum):
    WINDOWS = 'windows'
    MAC = 'mac'
    OTHER = 'other'

    @classmethod
    def from_sys_platform(cls, sys_platform: str) -> Self:
        if sys_platform == 'win32':
            return cls.WINDOWS
        if sys_platform == 'darwin':
            return cls.MAC
        return cls.OTHER

    @classmethod
    def detect(cls) -> Self:
        return cls.from_sys_platform(sys.platform)


# Decided once, at import.
HOST = Platform.detect()
