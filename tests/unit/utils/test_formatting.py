"""Unit tests for Rich formatting helpers."""

from apkctl.models.application import Application
from apkctl.utils.formatting import create_app_table, format_app_row


class TestFormatAppRow:
    """Tests for format_app_row."""

    def test_user_app(self, sample_apps: list[Application]) -> None:
        """User apps get a filled circle and the user style."""
        icon, name, package, version = format_app_row(sample_apps[0])

        assert icon == "[app_user]●[/]"
        assert name == "[app_user]Firefox[/]"
        assert package == "[muted]org.mozilla.firefox[/]"
        assert version == "[info]128.0 (2015985)[/]"

    def test_system_app(self, sample_apps: list[Application]) -> None:
        """System apps get an empty circle and the system style."""
        icon, name, _, version = format_app_row(sample_apps[2])

        assert icon == "[app_system]○[/]"
        assert name == "[app_system]Settings[/]"
        assert version == "[info]34[/]"


def test_app_table_columns() -> None:
    """The app table has icon, name, package and version columns."""
    table = create_app_table("Apps")

    assert [c.header for c in table.columns] == ["", "App", "Package", "Version"]
    assert table.title == "Apps"
