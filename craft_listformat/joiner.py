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

"""Join list items using a pattern table."""

import dataclasses
from typing import List, Sequence, Tuple

from craft_listformat.patterns import PatternTable, instantiate


@dataclasses.dataclass(frozen=True)
class JoinResult:
    """A formatted list and the position of each item in it.

    :param text: The formatted list.
    :param offsets: For each item, the index in ``text`` where it starts.
    """

    text: str
    offsets: Tuple[int, ...] = ()


def join(items: Sequence[str], patterns: PatternTable) -> JoinResult:
    """Join the given items into a single string.

    Two items are joined with the ``two`` template. Longer lists are folded
    from the left: the first pair is joined with ``start``, each following
    item but the last is folded in with ``middle`` and the last item is
    added with ``end``.

    :param items: The list items, in display order.
    :param patterns: The templates to join items with.

    :returns: The joined text and the offset of every item.
    """
    count = len(items)

    if count == 0:
        return JoinResult(text="")

    if count == 1:
        return JoinResult(text=items[0], offsets=(0,))

    if count == 2:
        result = instantiate(patterns.two, items[0], items[1])
        return JoinResult(
            text=result.text, offsets=(result.first_offset, result.second_offset)
        )

    result = instantiate(patterns.start, items[0], items[1])
    acc = result.text
    offsets: List[int] = [result.first_offset, result.second_offset]

    for index in range(2, count):
        template = patterns.end if index == count - 1 else patterns.middle
        result = instantiate(template, acc, items[index])
        acc = result.text
        # everything folded so far moved along with the accumulated text
        offsets = [offset + result.first_offset for offset in offsets]
        offsets.append(result.second_offset)

    return JoinResult(text=acc, offsets=tuple(offsets))
