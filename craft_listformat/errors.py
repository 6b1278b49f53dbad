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

"""List format errors."""

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclasses.dataclass(repr=True)
class ListFormatError(Exception):
    """Unexpected error.

    :param brief: Brief description of error.
    :param details: Detailed information.
    :param resolution: Recommendation, if any.
    """

    brief: str
    details: Optional[str] = None
    resolution: Optional[str] = None

    def __str__(self) -> str:
        components = [self.brief]

        if self.details:
            components.append(self.details)

        if self.resolution:
            components.append(self.resolution)

        return "\n".join(components)


class InvalidConfiguration(ListFormatError):
    """The list type and style combination is not supported.

    :param message: The error message.
    """

    def __init__(self, message: str):
        self.message = message
        brief = f"Invalid list format configuration: {message}."
        resolution = (
            "Valid types are 'conjunction', 'disjunction' and 'unit'; "
            "valid styles are 'long', 'short' and 'narrow'."
        )

        super().__init__(brief=brief, resolution=resolution)


class MalformedPatternTable(ListFormatError):
    """A list pattern template is not well formed.

    :param message: The error message.
    """

    def __init__(self, message: str):
        self.message = message
        brief = "List pattern table validation failed."
        details = message
        resolution = (
            "Each pattern must contain the '{0}' and '{1}' placeholders "
            "exactly once."
        )

        super().__init__(brief=brief, details=details, resolution=resolution)

    @classmethod
    def from_validation_error(
        cls, error_list: Sequence["ErrorDetails"]
    ) -> "MalformedPatternTable":
        """Create a MalformedPatternTable from a pydantic error list.

        :param error_list: A list of dictionaries containing pydantic error definitions.
        """
        formatted_errors: List[str] = []

        for error in error_list:
            loc = error.get("loc")
            msg = error.get("msg")

            if not (loc and msg):
                continue

            field = ".".join(str(part) for part in loc)
            if error.get("type") == "missing":
                formatted_errors.append(f"- field {field!r} is required")
            elif error.get("type") == "extra_forbidden":
                formatted_errors.append(f"- extra field {field!r} not permitted")
            else:
                formatted_errors.append(f"- {msg} in field {field!r}")

        return cls(message="\n".join(formatted_errors))


class MalformedJoinResult(ListFormatError):
    """The element offsets of a join result are inconsistent with its items.

    :param message: The error message.
    :param resolution: How to fix the error, if the cause is known.
    """

    def __init__(self, message: str, resolution: Optional[str] = None):
        self.message = message
        brief = f"Malformed join result: {message}."
        if resolution is None:
            resolution = "This is a bug, please report it."

        super().__init__(brief=brief, resolution=resolution)


class LocaleDataNotFound(ListFormatError):
    """No list patterns are available for the requested locale.

    :param locale: The requested locale tag.
    :param key: The requested pattern key.
    """

    def __init__(self, *, locale: str, key: str):
        self.locale = locale
        self.key = key
        brief = f"No {key!r} list patterns found for locale {locale!r}."
        resolution = "Make sure the locale data directories are correct."

        super().__init__(brief=brief, resolution=resolution)


class LocaleDataError(ListFormatError):
    """A locale data file could not be loaded.

    :param filename: The locale data file.
    :param message: The error message.
    """

    def __init__(self, *, filename: Union[str, Path], message: str):
        self.filename = str(filename)
        self.message = message
        brief = f"Failed to load locale data from {self.filename!r}."
        details = message
        resolution = "Make sure the file contains valid list pattern data."

        super().__init__(brief=brief, details=details, resolution=resolution)
