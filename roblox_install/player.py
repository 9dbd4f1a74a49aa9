from __future__ import annotations
from typing import Optional

from .installs import PlayerInstall
from .platforms import HOST, Platform
from .reglib import Registry
from .strategies import strategy_for


class PlayerLocator:
    """ Finds the Roblox Player.  Only possible on Windows, from the
        registry.  There is no environment variable override.
    """

    def __init__(
        self,
        platform: Optional[Platform] = None,
        registry: Optional[Registry] = None,
        ):
        self.platform = platform or HOST
        self.strategy = strategy_for(self.platform, registry = registry)

    def locate(self) -> PlayerInstall:
        return self.strategy.locate_player()


def locate_player() -> PlayerInstall:
    return PlayerLocator().locate()
