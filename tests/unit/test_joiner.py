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

import pytest
from craft_listformat.joiner import JoinResult, join
from craft_listformat.patterns import PatternTable
from hypothesis import HealthCheck, given, settings, strategies


@pytest.mark.parametrize(
    ("items", "result"),
    [
        ([], JoinResult(text="", offsets=())),
        (["Only"], JoinResult(text="Only", offsets=(0,))),
        (["A", "B"], JoinResult(text="A and B", offsets=(0, 6))),
        (["A", "B", "C"], JoinResult(text="A, B, and C", offsets=(0, 3, 10))),
        (
            ["one", "two", "three", "four"],
            JoinResult(text="one, two, three, and four", offsets=(0, 5, 10, 21)),
        ),
    ],
)
def test_join(english_patterns, items, result):
    assert join(items, english_patterns) == result


def test_join_item_text_unchanged(english_patterns):
    result = join(["{0}", "{1}", "{0}{1}"], english_patterns)
    assert result.text == "{0}, {1}, and {0}{1}"
    assert result.offsets == (0, 5, 14)


def test_join_offsets_shift_with_prefix():
    patterns = PatternTable(
        two="[{0}|{1}]",
        start="<{0}, {1}>",
        middle="({0}; {1})",
        end="{{0}: {1}}",
    )
    result = join(["a", "b", "c", "d"], patterns)
    assert result.text == "{(<a, b>; c): d}"
    assert result.offsets == (3, 6, 10, 14)
    for item, offset in zip(["a", "b", "c", "d"], result.offsets):
        assert result.text[offset : offset + 1] == item


def test_join_two_uses_two_pattern():
    patterns = PatternTable(
        two="{0} & {1}", start="{0}, {1}", middle="{0}, {1}", end="{0} and {1}"
    )
    assert join(["x", "y"], patterns).text == "x & y"
    assert join(["x", "y", "z"], patterns).text == "x, y and z"


def test_join_reversed_template():
    patterns = PatternTable(
        two="{1} <- {0}", start="{0}, {1}", middle="{0}, {1}", end="{0}, {1}"
    )
    result = join(["first", "second"], patterns)
    assert result.text == "second <- first"
    assert result.offsets == (10, 0)


def test_join_does_not_sort_or_deduplicate(english_patterns):
    result = join(["b", "a", "b"], english_patterns)
    assert result.text == "b, a, and b"


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(items=strategies.lists(strategies.text(), max_size=8))
def test_join_item_spans_in_bounds(items):
    patterns = PatternTable(
        two="{0} and {1}", start="{0}, {1}", middle="{0}, {1}", end="{0}, and {1}"
    )
    result = join(items, patterns)

    assert len(result.offsets) == len(items)
    assert list(result.offsets) == sorted(result.offsets)

    previous_end = 0
    for item, offset in zip(items, result.offsets):
        assert offset >= previous_end
        assert offset + len(item) <= len(result.text)
        assert result.text[offset : offset + len(item)] == item
        previous_end = offset + len(item)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(items=strategies.lists(strategies.text(), max_size=6))
def test_join_is_deterministic(items):
    patterns = PatternTable(
        two="{0} or {1}", start="{0}, {1}", middle="{0}, {1}", end="{0}, or {1}"
    )
    assert join(items, patterns) == join(list(items), patterns)
