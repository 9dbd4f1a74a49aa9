from __future__ import annotations
import dataclasses
import pathlib


@dataclasses.dataclass(frozen=True)
class StudioInstall:
    content: pathlib.Path
    application: pathlib.Path
    built_in_plugins: pathlib.Path
    plugins: pathlib.Path
    root: pathlib.Path

    def as_dict(self) -> dict[str, str]:
        return {field.name: str(getattr(self, field.name))
                for field in dataclasses.fields(self)
               }


@dataclasses.dataclass(frozen=True)
class PlayerInstall:
    content: pathlib.Path
    application: pathlib.Path
    root: pathlib.Path

    def as_dict(self) -> dict[str, str]:
        return {field.name: str(getattr(self, field.name))
                for field in dataclasses.fields(self)
               }
