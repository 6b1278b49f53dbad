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

"""Locale-aware list formatter."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from craft_listformat import errors
from craft_listformat.joiner import join
from craft_listformat.keys import (
    ListType,
    PatternKey,
    Style,
    parse_list_type,
    parse_style,
    resolve_pattern_key,
)
from craft_listformat.locales import LocaleProvider, YamlLocaleProvider
from craft_listformat.patterns import PatternTable
from craft_listformat.settings import Settings
from craft_listformat.spans import Span, extract_spans
from craft_listformat.utils.locale_utils import (
    UNDETERMINED,
    canonicalize_tag,
    is_valid_tag,
)

logger = logging.getLogger(__name__)


class ResolvedOptions(BaseModel):
    """The options a list formatter was set up with."""

    model_config = ConfigDict(frozen=True)

    locale: str
    type: ListType
    style: Style

    def marshal(self) -> Dict[str, Any]:
        """Create a dictionary containing the resolved options."""
        return self.model_dump(mode="json")


class ListFormat:
    """Format lists of strings for a locale.

    The pattern table is obtained from the locale provider when the
    formatter is created and reused for every call.

    :param locale: The requested language tag. The default locale from
        :class:`Settings` is used if not set, empty or ``und``.
    :param list_type: The list type.
    :param style: The list style.
    :param provider: The locale data provider. By default, a
        :class:`YamlLocaleProvider` using the directories from
        :class:`Settings`.

    :raises InvalidConfiguration: If an option is not valid.
    :raises LocaleDataNotFound: If there are no patterns for the locale.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        *,
        list_type: Union[ListType, str] = ListType.CONJUNCTION,
        style: Union[Style, str] = Style.LONG,
        provider: Optional[LocaleProvider] = None,
    ):
        settings = Settings()

        self._list_type = parse_list_type(list_type)
        self._style = parse_style(style)
        self._key: PatternKey = resolve_pattern_key(self._list_type, self._style)
        self._locale = _select_locale(locale, settings.default_locale)

        if provider is None:
            provider = YamlLocaleProvider(settings.data_dirs)

        self._patterns: PatternTable = provider.get_patterns(self._locale, self._key)
        logger.debug(
            "list formatter set up for %s (%s patterns)", self._locale, self._key
        )

    @property
    def patterns(self) -> PatternTable:
        """Return the pattern table in use."""
        return self._patterns

    def resolved_options(self) -> ResolvedOptions:
        """Return the locale, type and style of this formatter."""
        return ResolvedOptions(
            locale=self._locale, type=self._list_type, style=self._style
        )

    def format(self, items: Iterable[str]) -> str:
        """Join the given items into a single string.

        :param items: The strings to join.

        :returns: The formatted list.
        """
        return join(_string_list(items), self._patterns).text

    def format_to_parts(self, items: Iterable[str]) -> List[Span]:
        """Join the given items and label the pieces of the result.

        :param items: The strings to join.

        :returns: The element and literal spans of the formatted list.
        """
        item_list = _string_list(items)
        return extract_spans(join(item_list, self._patterns), item_list)


def _select_locale(requested: Optional[str], default: str) -> str:
    tag = canonicalize_tag(requested or "")
    if not tag or tag == UNDETERMINED:
        return default

    if not is_valid_tag(tag):
        raise errors.InvalidConfiguration(f"invalid locale {requested!r}")

    return tag


def _string_list(items: Iterable[str]) -> List[str]:
    item_list = list(items)
    for item in item_list:
        if not isinstance(item, str):
            raise TypeError(f"list items must be strings, got {type(item).__name__}")
    return item_list
