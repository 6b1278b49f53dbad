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
import yaml
from craft_listformat import main


@pytest.fixture(autouse=True)
def no_user_data(mocker):
    return mocker.patch(
        "craft_listformat.main.BaseDirectory.load_data_paths", return_value=iter([])
    )


class TestMain:
    """Verify the command line interface."""

    def test_format(self, capsys):
        main.main(["A", "B", "C"])
        assert capsys.readouterr().out == "A, B, and C\n"

    def test_format_options(self, capsys):
        main.main(["--locale", "es", "--type", "disjunction", "uno", "dos", "tres"])
        assert capsys.readouterr().out == "uno, dos o tres\n"

    def test_format_unit_narrow(self, capsys):
        main.main(["-t", "unit", "-s", "narrow", "5 lb", "12 oz"])
        assert capsys.readouterr().out == "5 lb 12 oz\n"

    def test_format_no_items(self, capsys):
        main.main([])
        assert capsys.readouterr().out == "\n"

    def test_parts(self, capsys):
        main.main(["--parts", "A", "B"])
        assert yaml.safe_load(capsys.readouterr().out) == [
            {"type": "element", "value": "A"},
            {"type": "literal", "value": " and "},
            {"type": "element", "value": "B"},
        ]

    def test_parts_unicode(self, capsys):
        main.main(["--parts", "--locale", "ja", "りんご", "みかん"])
        out = capsys.readouterr().out
        assert "りんご" in out
        assert yaml.safe_load(out)[1] == {"type": "literal", "value": "、"}

    def test_data_dir(self, capsys, data_dir):
        main.main(["--data-dir", str(data_dir), "-l", "xx", "a", "b", "c"])
        assert capsys.readouterr().out == "a; b & c\n"

    def test_xdg_data_dir(self, capsys, data_dir, no_user_data):
        no_user_data.return_value = iter([str(data_dir)])
        main.main(["-l", "xx", "a", "b"])
        assert capsys.readouterr().out == "a & b\n"
        no_user_data.assert_called_once_with("craft-listformat")

    def test_version(self, capsys, mocker):
        mocker.patch("craft_listformat.__version__", "1.2.3")
        with pytest.raises(SystemExit) as raised:
            main.main(["--version"])
        assert raised.value.code is None
        assert capsys.readouterr().out == "craft-listformat 1.2.3\n"

    def test_invalid_locale(self, capsys):
        with pytest.raises(SystemExit) as raised:
            main.main(["--locale", "e", "A"])
        assert raised.value.code == 2
        assert capsys.readouterr().err.startswith(
            "Error: invalid configuration: Invalid list format configuration: "
            "invalid locale 'e'."
        )

    def test_bad_locale_data(self, capsys, tmp_path):
        (tmp_path / "xx.yaml").write_text("standard: [\n")
        with pytest.raises(SystemExit) as raised:
            main.main(["--data-dir", str(tmp_path), "-l", "xx", "A"])
        assert raised.value.code == 3
        assert capsys.readouterr().err.startswith(
            f"Error: Failed to load locale data from '{tmp_path / 'xx.yaml'}'."
        )

    def test_unreadable_locale_data(self, capsys, tmp_path, mocker):
        (tmp_path / "xx.yaml").write_text("")
        mocker.patch(
            "craft_listformat.locales.open",
            side_effect=PermissionError(13, "Permission denied", "xx.yaml"),
            create=True,
        )
        with pytest.raises(SystemExit) as raised:
            main.main(["--data-dir", str(tmp_path), "-l", "xx", "A"])
        assert raised.value.code == 1
        assert capsys.readouterr().err == "Error: xx.yaml: Permission denied.\n"

    def test_invalid_type(self, capsys):
        with pytest.raises(SystemExit) as raised:
            main.main(["--type", "and", "A"])
        assert raised.value.code == 2
        assert "invalid choice: 'and'" in capsys.readouterr().err
