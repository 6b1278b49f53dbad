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

from pathlib import Path

import pytest
from craft_listformat.patterns import PatternTable
from craft_listformat.settings import Settings


@pytest.fixture(autouse=True)
def reset_settings():
    """Start and finish every test with the default settings."""
    Settings.reset()

    yield

    Settings.reset()


@pytest.fixture
def english_patterns() -> PatternTable:
    return PatternTable(
        two="{0} and {1}",
        start="{0}, {1}",
        middle="{0}, {1}",
        end="{0}, and {1}",
    )


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """A locale data directory with a single 'xx' locale."""
    data_path = tmp_path / "data"
    data_path.mkdir()
    (data_path / "xx.yaml").write_text(
        "standard:\n"
        '  "2": "{0} & {1}"\n'
        '  start: "{0}; {1}"\n'
        '  middle: "{0}; {1}"\n'
        '  end: "{0} & {1}"\n'
    )
    return data_path


@pytest.fixture
def custom_default_locale():
    Settings.reset()
    Settings(default_locale="es")

    yield

    Settings.reset()
