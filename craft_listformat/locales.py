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

"""Locale data providers for list pattern tables."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

import yaml

from craft_listformat import errors
from craft_listformat.keys import PatternKey, parse_pattern_key
from craft_listformat.patterns import PatternTable
from craft_listformat.utils.locale_utils import fallback_chain

BUNDLED_DATA_DIR = Path(__file__).parent / "data"

logger = logging.getLogger(__name__)


class LocaleProvider(Protocol):
    """Obtain pattern tables from a locale database."""

    def get_patterns(self, locale: str, key: PatternKey) -> PatternTable:
        """Return the pattern table stored under ``key`` for ``locale``.

        :raises LocaleDataNotFound: If the database has no such table.
        """
        ...  # pragma: no cover


class YamlLocaleProvider:
    """Read pattern tables from ``<tag>.yaml`` files.

    Each file maps pattern keys (``standard``, ``or``, ``unit``,
    ``unit-short`` and ``unit-narrow``) to a table with the ``2`` (or
    ``two``), ``start``, ``middle`` and ``end`` templates. Directories are
    searched in order, and the bundled data directory is always searched
    last. Missing tables are looked up in less specific locales, ending with
    ``root``.

    :param data_dirs: Additional directories containing locale data files.
    """

    def __init__(self, data_dirs: Optional[Iterable[Union[str, Path]]] = None):
        self._data_dirs: List[Path] = [Path(d) for d in data_dirs or []]
        self._data_dirs.append(BUNDLED_DATA_DIR)
        self._cache: Dict[str, Optional[Dict[str, PatternTable]]] = {}

    @property
    def data_dirs(self) -> List[Path]:
        """Return the directories searched for locale data."""
        return self._data_dirs.copy()

    def get_patterns(self, locale: str, key: PatternKey) -> PatternTable:
        """Return the pattern table stored under ``key`` for ``locale``.

        :param locale: A canonical language tag.
        :param key: The pattern key.

        :returns: The pattern table found in the most specific locale.

        :raises InvalidConfiguration: If the key is not a pattern key.
        :raises LocaleDataNotFound: If no locale in the chain has the table.
        """
        key = parse_pattern_key(key)

        for tag in fallback_chain(locale):
            tables = self._load(tag)
            if tables and key.value in tables:
                if tag != locale:
                    logger.debug("using %r %s patterns for %r", tag, key, locale)
                return tables[key.value]

        raise errors.LocaleDataNotFound(locale=locale, key=key.value)

    def _load(self, tag: str) -> Optional[Dict[str, PatternTable]]:
        if tag not in self._cache:
            self._cache[tag] = self._read_tables(tag)

        return self._cache[tag]

    def _read_tables(self, tag: str) -> Optional[Dict[str, PatternTable]]:
        for data_dir in self._data_dirs:
            data_file = data_dir / f"{tag}.yaml"
            if data_file.is_file():
                return load_pattern_file(data_file)

        return None


def load_pattern_file(filename: Union[str, Path]) -> Dict[str, PatternTable]:
    """Load the pattern tables defined in a locale data file.

    :param filename: The YAML file to load.

    :returns: A dictionary mapping pattern keys to tables.

    :raises LocaleDataError: If the file is not a valid locale data file.
    """
    logger.debug("loading list patterns from %s", filename)

    try:
        with open(filename, encoding="utf-8") as data_file:
            data = yaml.safe_load(data_file)
    except yaml.YAMLError as err:
        raise errors.LocaleDataError(filename=filename, message=str(err)) from err

    if not isinstance(data, dict):
        raise errors.LocaleDataError(
            filename=filename, message="locale data is not a dictionary"
        )

    tables: Dict[str, PatternTable] = {}
    valid_keys = {key.value for key in PatternKey}

    for name, table_data in data.items():
        if name not in valid_keys:
            raise errors.LocaleDataError(
                filename=filename, message=f"unknown pattern key {name!r}"
            )
        try:
            tables[name] = PatternTable.unmarshal(table_data)
        except (TypeError, errors.MalformedPatternTable) as err:
            raise errors.LocaleDataError(
                filename=filename, message=f"{name}: {err}"
            ) from err

    return tables
