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

"""Format lists of items as human-readable text."""

from .errors import (
    InvalidConfiguration,
    ListFormatError,
    LocaleDataError,
    LocaleDataNotFound,
    MalformedJoinResult,
    MalformedPatternTable,
)
from .formatter import ListFormat, ResolvedOptions
from .joiner import JoinResult, join
from .keys import ListType, PatternKey, Style, resolve_pattern_key
from .locales import LocaleProvider, YamlLocaleProvider
from .patterns import PatternTable
from .settings import Settings
from .spans import Span, SpanType, extract_spans


try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("craft-listformat")
    except PackageNotFoundError:
        __version__ = "dev"


__all__ = [
    "__version__",
    "InvalidConfiguration",
    "ListFormatError",
    "LocaleDataError",
    "LocaleDataNotFound",
    "MalformedJoinResult",
    "MalformedPatternTable",
    "ListFormat",
    "ResolvedOptions",
    "JoinResult",
    "join",
    "ListType",
    "PatternKey",
    "Style",
    "resolve_pattern_key",
    "LocaleProvider",
    "YamlLocaleProvider",
    "PatternTable",
    "Settings",
    "Span",
    "SpanType",
    "extract_spans",
]
