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

"""Split a formatted list into element and literal spans."""

import enum
from typing import Any, Dict, List, NamedTuple, Sequence

from craft_listformat import errors
from craft_listformat.joiner import JoinResult


@enum.unique
class SpanType(str, enum.Enum):
    """The kind of text a span covers."""

    LITERAL = "literal"
    ELEMENT = "element"

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"

    def __str__(self) -> str:
        return self.value


class Span(NamedTuple):
    """A labeled piece of a formatted list.

    :param type: Whether the text is an original item or connective text.
    :param value: The text covered by the span.
    """

    type: SpanType
    value: str

    @classmethod
    def literal(cls, value: str) -> "Span":
        """Create a span of connective text."""
        return cls(SpanType.LITERAL, value)

    @classmethod
    def element(cls, value: str) -> "Span":
        """Create a span holding an original item."""
        return cls(SpanType.ELEMENT, value)

    def marshal(self) -> Dict[str, Any]:
        """Create a dictionary containing the span data."""
        return {"type": self.type.value, "value": self.value}


def extract_spans(join_result: JoinResult, items: Sequence[str]) -> List[Span]:
    """Partition a joined list into alternating literal and element spans.

    :param join_result: The output of joining ``items``.
    :param items: The items that were joined, in the same order.

    :returns: The spans, whose values concatenate to the joined text.

    :raises MalformedJoinResult: If the offsets don't match the items.
    """
    text = join_result.text
    offsets = join_result.offsets

    if len(offsets) != len(items):
        raise errors.MalformedJoinResult(
            f"{len(offsets)} offsets recorded for {len(items)} items"
        )

    # an empty list never has connective text, whatever the host rendered
    if not items:
        return []

    spans: List[Span] = []
    i = 0

    for index, (item, offset) in enumerate(zip(items, offsets)):
        if offset < i:
            raise errors.MalformedJoinResult(
                f"item {index} at offset {offset} overlaps the previous span",
                resolution=(
                    "Items must appear in list order: make sure no list pattern "
                    "places '{1}' before '{0}'."
                ),
            )

        end = offset + len(item)
        if end > len(text):
            raise errors.MalformedJoinResult(
                f"item {index} ends at {end}, past the end of the text"
            )

        if text[offset:end] != item:
            raise errors.MalformedJoinResult(
                f"item {index} does not match the text at offset {offset}"
            )

        if i < offset:
            spans.append(Span.literal(text[i:offset]))
            i = offset

        spans.append(Span.element(item))
        i = end

    if i < len(text):
        spans.append(Span.literal(text[i:]))

    return spans
