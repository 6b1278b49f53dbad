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

"""Definitions and helpers to select list pattern keys."""

import enum
from typing import Optional, Union

from craft_listformat import errors


@enum.unique
class ListType(str, enum.Enum):
    """The semantic category of a list.

    A ``CONJUNCTION`` list joins its items with "and", a ``DISJUNCTION``
    list offers them as alternatives joined with "or", and a ``UNIT`` list
    is a plain enumeration of quantities such as "5 pounds, 12 ounces".
    """

    CONJUNCTION = "conjunction"
    DISJUNCTION = "disjunction"
    UNIT = "unit"

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"

    def __str__(self) -> str:
        return self.value


@enum.unique
class Style(str, enum.Enum):
    """The verbosity of the list connectors."""

    LONG = "long"
    SHORT = "short"
    NARROW = "narrow"

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"

    def __str__(self) -> str:
        return self.value


@enum.unique
class PatternKey(str, enum.Enum):
    """The keys under which locale data stores list pattern tables."""

    STANDARD = "standard"
    OR = "or"
    UNIT = "unit"
    UNIT_SHORT = "unit-short"
    UNIT_NARROW = "unit-narrow"

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"

    def __str__(self) -> str:
        return self.value


def parse_list_type(value: Union[ListType, str]) -> ListType:
    """Obtain the list type named by the given value.

    :param value: A list type or its name.

    :returns: The list type.

    :raises InvalidConfiguration: If the value does not name a list type.
    """
    try:
        return ListType(value)
    except ValueError as err:
        raise errors.InvalidConfiguration(f"unknown list type {value!r}") from err


def parse_style(value: Union[Style, str]) -> Style:
    """Obtain the style named by the given value.

    :param value: A style or its name.

    :returns: The style.

    :raises InvalidConfiguration: If the value does not name a style.
    """
    try:
        return Style(value)
    except ValueError as err:
        raise errors.InvalidConfiguration(f"unknown style {value!r}") from err


def parse_pattern_key(value: Union[PatternKey, str]) -> PatternKey:
    """Obtain the pattern key named by the given value.

    :raises InvalidConfiguration: If the value does not name a pattern key.
    """
    try:
        return PatternKey(value)
    except ValueError as err:
        raise errors.InvalidConfiguration(f"unknown pattern key {value!r}") from err


def resolve_pattern_key(
    list_type: Union[ListType, str], style: Optional[Union[Style, str]] = None
) -> PatternKey:
    """Obtain the locale data key for a list type and style.

    Conjunctions and disjunctions have a single pattern set each, so the
    style only selects between unit patterns.

    :param list_type: The list type.
    :param style: The list style, ``Style.LONG`` if not set.

    :returns: The key of the pattern table to use.

    :raises InvalidConfiguration: If the combination is not supported.
    """
    list_type = parse_list_type(list_type)
    style = Style.LONG if style is None else parse_style(style)

    if list_type == ListType.CONJUNCTION:
        return PatternKey.STANDARD

    if list_type == ListType.DISJUNCTION:
        return PatternKey.OR

    if style == Style.NARROW:
        return PatternKey.UNIT_NARROW

    if style == Style.SHORT:
        return PatternKey.UNIT_SHORT

    return PatternKey.UNIT
