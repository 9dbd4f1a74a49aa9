import pathlib
import warnings
from typing import Iterator

from .errors import NotInstalled


VERSIONS_DIR_NAME = 'Versions'

CONTENT_DIR_NAME = 'content'


def is_unversioned_install(root: pathlib.Path) -> bool:
    try:
        return (root / CONTENT_DIR_NAME).is_dir()
    except OSError as err:
        raise NotInstalled(root) from err


def version_directories(root: pathlib.Path) -> list[pathlib.Path]:
    """ Entries of root/Versions, in the order the OS lists them. """

    versions_dir = root / VERSIONS_DIR_NAME

    try:
        # Read the whole listing now, so the directory handle is closed before returning.
        return list(versions_dir.iterdir())
    except OSError as err:
        raise NotInstalled(versions_dir) from err


def _is_build(entry: pathlib.Path, binary_name: str) -> bool:
    try:
        return entry.is_dir() and (entry / binary_name).is_file()
    except OSError as err:
        warnings.warn(f'Skipping unreadable build: {entry}.  {err}')
        return False


def versioned_installs(root: pathlib.Path, binary_name: str) -> Iterator[pathlib.Path]:
    for entry in version_directories(root):
        if _is_build(entry, binary_name):
            yield entry


def first_versioned_install(root: pathlib.Path, binary_name: str) -> pathlib.Path:
    """ The first sub directory of root/Versions containing binary_name.

        Not sorted by version number.  Whichever build the OS lists
        first wins.
    """

    installs = list(versioned_installs(root, binary_name))

    if not installs:
        raise NotInstalled(root / VERSIONS_DIR_NAME)

    first, *others = installs

    if others:
        warnings.warn(f'Found {len(installs)} builds containing {binary_name} '
                      f'in: {root / VERSIONS_DIR_NAME}.  Using: {first.name}, '
                      f'ignoring: {[other.name for other in others]}'
                     )

    return first
