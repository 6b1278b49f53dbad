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

"""Utilities and helpers."""

import contextlib
from typing import Any, Dict


def package_name() -> str:
    """Return the topmost package name."""
    return __name__.split(".", maxsplit=1)[0]


class Singleton(type):
    """Singleton metaclass.

    The first call creates the instance; later calls return it and must
    not pass any arguments.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        """Return an existing instance, or create a new instance."""
        if cls not in cls._instances:
            instance = super().__call__(*args, **kwargs)
            cls._instances[cls] = instance
            return instance

        if args or kwargs:
            raise RuntimeError(f"{cls.__name__} parameters can only be set once")

        return cls._instances[cls]

    def discard(cls) -> None:
        """Drop the stored instance, if any."""
        with contextlib.suppress(KeyError):
            del cls._instances[cls]
