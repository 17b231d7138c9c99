# pygopherclient -- Gopher protocol client in Python
# module: command-line menu browser
# Copyright (C) 2021 Michael Lazar
# Copyright (C) 2002 John Goerzen
# <jgoerzen@complete.org>
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; version 2 of the License.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program; if not, write to the Free Software
#    Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA
import argparse
import sys
import traceback
import typing

from pygopherclient import GopherExceptions, initialization, version
from pygopherclient.gopherentry import DirectoryEntry


def render(entry: DirectoryEntry) -> str:
    return "[%6s] %s" % (entry.kind.label, entry.display)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pygopherclient", description=version.description
    )
    parser.add_argument("-c", "--config", help="configuration file")
    parser.add_argument("host", nargs="?", help="server to connect to")
    parser.add_argument("port", nargs="?", type=int, help="port, default 70")
    parser.add_argument("selector", nargs="?", help="menu selector")
    parser.add_argument(
        "-V", "--version", action="version", version=version.versionstr
    )
    return parser


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    args = get_parser().parse_args(argv)

    if args.config:
        config = initialization.init_config(args.config)
        initialization.init_logger(config, args.config)
    else:
        config = initialization.default_config()
        initialization.init_logger(config, "(defaults)")
    initialization.init_exceptions(config)

    client = initialization.get_client(config, args.host, args.port)
    selector = args.selector
    if selector is None:
        selector = config.get("pygopherclient", "selector")

    try:
        menu = client.fetch_directory(selector.encode(errors="surrogateescape"))
    except (OSError, GopherExceptions.GopherError) as e:
        if GopherExceptions.tracebacks:
            traceback.print_exc()
        print(f"error: {e}", file=sys.stderr)
        return 1

    for entry in menu:
        print(render(entry))
    return 0
