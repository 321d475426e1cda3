"""Unit tests for the persisted export location."""

from pathlib import Path

from apkctl.core.settings import Settings, load_settings, save_settings
from apkctl.storage.location import ExportLocation


class TestExportLocation:
    """Tests for ExportLocation."""

    def test_unset_by_default(self, tmp_path: Path) -> None:
        """A fresh settings file has no export location."""
        location = ExportLocation(settings_path=tmp_path / "settings.toml")

        assert location.current_location() is None

    def test_set_location_persists_absolute_path(self, tmp_path: Path) -> None:
        """set_location stores a resolved path."""
        settings_path = tmp_path / "settings.toml"
        location = ExportLocation(settings_path=settings_path)

        stored = location.set_location(tmp_path / "apks" / ".." / "out")

        assert stored == (tmp_path / "out").resolve()
        assert load_settings(settings_path).export_location == stored
        assert ExportLocation(settings_path=settings_path).current_location() == stored

    def test_set_location_keeps_other_settings(self, tmp_path: Path) -> None:
        """Changing the location leaves other settings untouched."""
        settings_path = tmp_path / "settings.toml"
        save_settings(Settings(serial="abc123", include_system_apps=False), settings_path)

        ExportLocation(settings_path=settings_path).set_location(tmp_path)

        settings = load_settings(settings_path)
        assert settings.serial == "abc123"
        assert settings.include_system_apps is False

    def test_clear_location(self, tmp_path: Path) -> None:
        """clear_location forgets the folder."""
        location = ExportLocation(settings_path=tmp_path / "settings.toml")
        location.set_location(tmp_path)

        location.clear_location()

        assert location.current_location() is None

    def test_ensure_prompts_when_unset(self, tmp_path: Path) -> None:
        """The prompt answer is persisted."""
        answers: list[Path] = []

        def prompt() -> Path:
            answers.append(tmp_path)
            return tmp_path

        location = ExportLocation(settings_path=tmp_path / "settings.toml", prompt=prompt)

        location.ensure_location_chosen()

        assert len(answers) == 1
        assert location.current_location() == tmp_path.resolve()

    def test_ensure_does_not_prompt_when_set(self, tmp_path: Path) -> None:
        """A persisted location is reused without asking."""
        calls: list[int] = []

        def prompt() -> Path:
            calls.append(1)
            return tmp_path / "other"

        location = ExportLocation(settings_path=tmp_path / "settings.toml", prompt=prompt)
        location.set_location(tmp_path)

        location.ensure_location_chosen()

        assert calls == []
        assert location.current_location() == tmp_path.resolve()

    def test_declined_prompt_leaves_location_unset(self, tmp_path: Path) -> None:
        """Declining the prompt persists nothing."""
        settings_path = tmp_path / "settings.toml"
        location = ExportLocation(settings_path=settings_path, prompt=lambda: None)

        location.ensure_location_chosen()

        assert location.current_location() is None
        assert not settings_path.exists()

    def test_without_prompt_stays_unset(self, tmp_path: Path) -> None:
        """Without a prompt, ensure_location_chosen is a no-op."""
        location = ExportLocation(settings_path=tmp_path / "settings.toml")

        location.ensure_location_chosen()

        assert location.current_location() is None
