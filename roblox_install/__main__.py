import sys
import argparse
import json
from typing import Callable, Optional, Sequence

from .errors import RobloxInstallError
from .installs import PlayerInstall, StudioInstall
from .player import PlayerLocator
from .studio import StudioLocator


def _locate_studio(namespace: argparse.Namespace) -> StudioInstall:
    locator = StudioLocator()
    if namespace.directory is not None:
        return locator.locate_from_directory(namespace.directory)
    return locator.locate()


def _locate_player(namespace: argparse.Namespace) -> PlayerInstall:
    return PlayerLocator().locate()


COMMANDS: dict[str, Callable[[argparse.Namespace], StudioInstall | PlayerInstall]] = {
    'studio' : _locate_studio,
    'player' : _locate_player,
    }


def _print_install(install: StudioInstall | PlayerInstall, as_json: bool) -> None:
    paths = install.as_dict()

    if as_json:
        print(json.dumps(paths, indent=2))
        return

    width = max(len(name) for name in paths)
    for name, path in paths.items():
        print(f'{name:<{width}} : {path}')


def main(args: Optional[Sequence[str]] = None) -> int:

    parser = argparse.ArgumentParser(prog='roblox-install')
    subparsers = parser.add_subparsers(required=True, dest='command')

    sub_parsers = {}

    for command_name in COMMANDS:
        sub_parsers[command_name] = sub_parser = subparsers.add_parser(command_name)
        sub_parser.add_argument('--json', action='store_true', dest='as_json')

    sub_parsers['studio'].add_argument(
        '--directory',
        default=None,
        help='Look for Studio in this directory, instead of the usual places',
        )

    namespace = parser.parse_args(sys.argv[1:] if args is None else args)

    command = COMMANDS[namespace.command]

    try:
        install = command(namespace)
    except RobloxInstallError as err:
        print(f'Error: {err}', file=sys.stderr)
        return 1

    _print_install(install, namespace.as_json)

    return 0


if __name__ == '__main__':
    sys.exit(main())
