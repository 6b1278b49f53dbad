# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright 2026 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""List formatting command line tool.

This is the main entry point for the craft_listformat package, invoked
when running `python -mcraft_listformat`. It formats the items given in
the command line for a locale and prints the result, either as a string
or (using `--parts`) as a YAML list of labeled spans.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml
from xdg import BaseDirectory  # type: ignore

import craft_listformat
import craft_listformat.errors
from craft_listformat import ListFormat, ListType, Style, YamlLocaleProvider
from craft_listformat.utils import package_name

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the command-line interface."""
    options = _parse_arguments(argv)

    if options.version:
        print(f"craft-listformat {craft_listformat.__version__}")
        sys.exit()

    if options.trace:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logging.basicConfig(level=log_level)

    try:
        _format_items(options)
    except OSError as err:
        msg = err.strerror
        if err.filename:
            msg = f"{err.filename}: {msg}"
        print(f"Error: {msg}.", file=sys.stderr)
        sys.exit(1)
    except craft_listformat.errors.InvalidConfiguration as err:
        print(f"Error: invalid configuration: {err}", file=sys.stderr)
        sys.exit(2)
    except craft_listformat.errors.ListFormatError as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(3)


def _format_items(options: argparse.Namespace) -> None:
    data_dirs = list(options.data_dir or [])
    # user data directories from $XDG_DATA_HOME and $XDG_DATA_DIRS
    data_dirs.extend(BaseDirectory.load_data_paths(_xdg_resource()))
    logger.debug("locale data directories: %s", data_dirs)

    formatter = ListFormat(
        options.locale,
        list_type=options.type,
        style=options.style,
        provider=YamlLocaleProvider(data_dirs),
    )

    if options.parts:
        parts = [span.marshal() for span in formatter.format_to_parts(options.items)]
        print(yaml.safe_dump(parts, allow_unicode=True, sort_keys=False), end="")
    else:
        print(formatter.format(options.items))


def _xdg_resource() -> str:
    return package_name().replace("_", "-")


def _parse_arguments(argv: Optional[List[str]]) -> argparse.Namespace:
    prog = "python -m craft_listformat"
    description = "Format a list of items as a human-readable string."

    parser = argparse.ArgumentParser(prog=prog, description=description, add_help=False)
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="Show this help message and exit.",
    )
    parser.add_argument(
        "-l",
        "--locale",
        metavar="tag",
        default=None,
        help="The locale to format the list for. Defaults to 'en'.",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=[list_type.value for list_type in ListType],
        default=ListType.CONJUNCTION.value,
        help="The list type. Default is 'conjunction'.",
    )
    parser.add_argument(
        "-s",
        "--style",
        choices=[style.value for style in Style],
        default=Style.LONG.value,
        help="The list style. Default is 'long'.",
    )
    parser.add_argument(
        "--parts",
        action="store_true",
        help="Show the element and literal parts of the formatted list.",
    )
    parser.add_argument(
        "--data-dir",
        metavar="dirname",
        action="append",
        help="Also search the specified directory for locale data.",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug messages.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Display the craft-listformat version and exit.",
    )
    parser.add_argument(
        "items",
        nargs="*",
        help="The items to format.",
    )

    return parser.parse_args(argv)
