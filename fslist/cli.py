import argparse
import logging
import sys
import time
from typing import Iterable, List, Optional

import yaml
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.text import Text

from fslist import __version__
from fslist.connector import Connector
from fslist.local import LocalConnector
from fslist.render import TableRenderer
from fslist.transform import Transform, apply_transforms
from fslist.utils.errors import FSListError
from fslist.utils.style import Theme

logger = logging.getLogger(__name__)


class CLI:
    """Directory listing pipeline.

    Attributes
    ----------
    connector : Connector
        Connector the directory is collected with.
    renderer : TableRenderer
        Table renderer.
    """

    def __init__(self, connector: Connector, renderer: TableRenderer):
        self.connector = connector
        self.renderer = renderer

    def list(
        self,
        path: str,
        transforms: Iterable[Transform] = (),
        as_of: Optional[float] = None
    ) -> List[Text]:
        """Collect, transform and render a directory.

        Parameters
        ----------
        path : str
            Directory path.
        transforms : Iterable[Transform], default=()
            Requested transforms.
        as_of : float, optional
            Reference timestamp for entry ages, current time if omitted.

        Returns
        -------
        List[Text]
            Table lines.
        """
        if as_of is None:
            as_of = time.time()
        entry_set = self.connector.scandir(path, as_of=as_of)
        apply_transforms(entry_set, transforms)
        return self.renderer.render(entry_set)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fslist', description='ls clone', add_help=False)
    parser.add_argument('path', nargs='?', default='.', help='location to list the contained entries')
    parser.add_argument('-r', '--reverse', action='store_true', help='reverse listing')
    parser.add_argument('-h', '--hidden', action='store_true', dest='non_hidden', help='list without hidden entries')
    parser.add_argument('--config', type=str, help='path to theme configuration file')
    parser.add_argument('--no-color', action='store_true', dest='no_color', help='disable colors')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--help', action='help', help='show this help message and exit')
    return parser


def requested_transforms(args: argparse.Namespace) -> List[Transform]:
    transforms = []
    if args.non_hidden:
        transforms.append(Transform.NON_HIDDEN)
    if args.reverse:
        transforms.append(Transform.REVERSE)
    return transforms


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    console = Console(no_color=args.no_color or None, highlight=False)
    err_console = Console(stderr=True, no_color=args.no_color or None, highlight=False)

    try:
        theme = Theme.from_yaml(args.config) if args.config else Theme()
    except (OSError, yaml.YAMLError, ValueError, StyleSyntaxError) as err:
        err_console.print(f'error: invalid theme config: {err}', style='bold red', markup=False, soft_wrap=True)
        return 2

    cli = CLI(LocalConnector(), TableRenderer(theme))
    try:
        lines = cli.list(args.path, requested_transforms(args))
    except FSListError as err:
        logger.debug(f'Listing of {err.path!r} failed', exc_info=True)
        err_console.print(f'error: {err.kind}: {err}', style='bold red', markup=False, soft_wrap=True)
        return 1

    # whole table is rendered before anything reaches stdout
    with console.capture() as capture:
        for line in lines:
            console.print(line, soft_wrap=True)
    sys.stdout.write(capture.get())
    return 0


if __name__ == '__main__':
    sys.exit(main())
