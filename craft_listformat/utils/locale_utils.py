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

"""Locale tag helpers."""

import re
from typing import List

_TAG_RE = re.compile(r"^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$")

UNDETERMINED = "und"
ROOT = "root"


def is_valid_tag(tag: str) -> bool:
    """Verify if a string is shaped like a BCP 47 language tag."""
    return bool(_TAG_RE.match(tag))


def canonicalize_tag(tag: str) -> str:
    """Normalize a language tag and strip its extensions.

    Underscores are accepted as separators. Everything from the first
    singleton subtag on (``-u-``, ``-t-`` or ``-x-`` sequences) is removed,
    the language is lowercased, a script is titlecased and a region is
    uppercased.

    :param tag: The language tag to normalize.

    :returns: The normalized tag, or an empty string if ``tag`` is empty.
    """
    subtags = [subtag for subtag in tag.replace("_", "-").split("-") if subtag]
    if not subtags:
        return ""

    canonical = [subtags[0].lower()]
    for subtag in subtags[1:]:
        if len(subtag) == 1:
            break
        if len(subtag) == 4 and subtag.isalpha():
            canonical.append(subtag.title())
        elif len(subtag) == 2 or (len(subtag) == 3 and subtag.isdigit()):
            canonical.append(subtag.upper())
        else:
            canonical.append(subtag.lower())

    return "-".join(canonical)


def fallback_chain(tag: str) -> List[str]:
    """List the tags to look up for a locale, most specific first.

    :param tag: A canonical language tag.

    :returns: The tag, its truncations and finally ``root``.
    """
    chain: List[str] = []
    subtags = tag.split("-") if tag else []

    while subtags:
        chain.append("-".join(subtags))
        subtags.pop()

    if ROOT not in chain:
        chain.append(ROOT)

    return chain
