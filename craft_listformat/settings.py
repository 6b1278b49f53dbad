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

"""Global settings to be configured by the application."""

import dataclasses
import logging
from typing import Tuple

from craft_listformat.errors import InvalidConfiguration
from craft_listformat.utils import Singleton
from craft_listformat.utils.locale_utils import (
    UNDETERMINED,
    canonicalize_tag,
    is_valid_tag,
)

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Settings(metaclass=Singleton):
    """Configurable list format settings.

    :cvar default_locale: The locale used when none is requested.
    :cvar data_dirs: Additional directories to search for locale data,
        searched before the bundled data.
    """

    default_locale: str = "en"
    data_dirs: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate settings.

        :raises InvalidConfiguration: If the default locale is not a valid tag.
        """
        locale = canonicalize_tag(self.default_locale)
        if not is_valid_tag(locale) or locale == UNDETERMINED:
            raise InvalidConfiguration(
                f"invalid default locale {self.default_locale!r}"
            )

        object.__setattr__(self, "default_locale", locale)

        # lists given by the application are stored as tuples
        object.__setattr__(self, "data_dirs", tuple(self.data_dirs))

    @classmethod
    def reset(cls) -> None:
        """Delete stored class instance."""
        logger.debug("deleting current list format settings")
        cls.discard()
