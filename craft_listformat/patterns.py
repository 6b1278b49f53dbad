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

"""List pattern tables and template instantiation."""

import re
from typing import Any, Dict, NamedTuple

import pydantic
from pydantic import BaseModel, ConfigDict, field_validator

from craft_listformat import errors

_PLACEHOLDER_RE = re.compile(r"\{([01])\}")


class Instantiation(NamedTuple):
    """The result of substituting both placeholders of a template.

    :param text: The instantiated template.
    :param first_offset: Where the ``{0}`` argument starts in ``text``.
    :param second_offset: Where the ``{1}`` argument starts in ``text``.
    """

    text: str
    first_offset: int
    second_offset: int


def instantiate(template: str, first: str, second: str) -> Instantiation:
    """Substitute the ``{0}`` and ``{1}`` placeholders of a template.

    Substitution happens in a single pass: braces in the arguments are
    copied verbatim and never expanded.

    :param template: A template containing both placeholders once.
    :param first: The text for ``{0}``.
    :param second: The text for ``{1}``.

    :returns: The instantiated text and the offsets of both arguments.
    """
    arguments = (first, second)
    offsets = [-1, -1]
    chunks = []
    length = 0
    cursor = 0

    for match in _PLACEHOLDER_RE.finditer(template):
        literal = template[cursor : match.start()]
        chunks.append(literal)
        length += len(literal)

        index = int(match.group(1))
        offsets[index] = length
        chunks.append(arguments[index])
        length += len(arguments[index])
        cursor = match.end()

    chunks.append(template[cursor:])

    return Instantiation("".join(chunks), offsets[0], offsets[1])


class PatternTable(BaseModel):
    """The four connective templates used to join a list.

    :cvar two: Joins a list of exactly two items.
    :cvar start: Joins the first two items of a longer list.
    :cvar middle: Folds one more item into the accumulated text.
    :cvar end: Joins the accumulated text with the last item.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    two: str = pydantic.Field(alias="2")
    start: str
    middle: str
    end: str

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as err:
            raise errors.MalformedPatternTable.from_validation_error(
                err.errors()
            ) from err

    @field_validator("two", "start", "middle", "end")
    @classmethod
    def has_both_placeholders(cls, value: str) -> str:
        """Make sure the template contains each placeholder exactly once."""
        found = [match.group(1) for match in _PLACEHOLDER_RE.finditer(value)]
        for placeholder in ("0", "1"):
            count = found.count(placeholder)
            if count == 0:
                raise ValueError(f"missing placeholder '{{{placeholder}}}'")
            if count > 1:
                raise ValueError(f"repeated placeholder '{{{placeholder}}}'")
        return value

    @classmethod
    def unmarshal(cls, data: Dict[str, Any]) -> "PatternTable":
        """Create and populate a new ``PatternTable`` object from dictionary data.

        Locale data may name the two-item template either ``two`` or ``2``.

        :param data: The dictionary data to unmarshal.

        :return: The newly created object.

        :raise TypeError: If data is not a dictionary.
        :raise MalformedPatternTable: If a template is not valid.
        """
        if not isinstance(data, dict):
            raise TypeError("pattern table data is not a dictionary")

        return cls(**{str(key): value for key, value in data.items()})

    def marshal(self) -> Dict[str, str]:
        """Create a dictionary containing the pattern table data.

        :return: The newly created dictionary.
        """
        return self.model_dump(by_alias=False)
