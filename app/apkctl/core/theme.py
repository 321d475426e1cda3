"""Color theme for apkctl output.

The bundled data/theme.toml holds the default color of every style the
CLI prints with. A user file at ~/.config/apkctl/theme.toml may override
any of them under a [colors] table. Each user color is checked on its
own: an unknown name or a color rich cannot parse is skipped with a
warning and the bundled color stays in effect.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.color import Color, ColorParseError
from rich.theme import Theme

from apkctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Colors of apkctl messages, tables and app listings.

    Values are anything rich accepts as a color: "#RRGGBB", a name such
    as "cyan", "color(33)" or "rgb(0,128,255)".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    app_user: str = "#69B9A1"
    app_system: str = "#226666"

    @field_validator("*")
    @classmethod
    def _check_color(cls, value: str) -> str:
        value = value.strip()
        try:
            Color.parse(value)
        except ColorParseError as e:
            raise ValueError(str(e)) from e
        return value

    def to_rich_theme(self) -> Theme:
        """Map the colors onto the style names used in markup and tables."""
        return Theme(
            {
                "muted": self.muted,
                "dim": self.muted,
                "bold_header": f"bold {self.header}",
                "border": self.border,
                "success": self.success,
                "warning": self.warning,
                "error": f"bold {self.error}",
                "info": self.info,
                "app_user": f"bold {self.app_user}",
                "app_system": self.app_system,
            }
        )


def bundled_colors() -> ThemeColors:
    """Colors shipped in apkctl/data/theme.toml."""
    source = resources.files("apkctl.data").joinpath("theme.toml")
    data = tomllib.loads(source.read_text(encoding="utf-8"))
    return ThemeColors.model_validate(data["colors"])


def _read_user_colors(path: Path) -> dict[str, object]:
    """Return the [colors] table of a user theme file, or {} if unusable."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_colors(user_path: Path | None = None) -> ThemeColors:
    """Bundled colors with the valid user overrides applied.

    Args:
        user_path: User theme file. If None, uses the default user theme path.

    Returns:
        Merged ThemeColors.
    """
    path = user_path or get_user_theme_path()
    colors = bundled_colors()

    for name, value in _read_user_colors(path).items():
        try:
            colors = ThemeColors.model_validate({**colors.model_dump(), name: value})
        except ValidationError as e:
            logger.warning("Ignoring color %r in %s: %s", name, path, e.errors()[0]["msg"])

    return colors


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, built once per process."""
    return load_colors().to_rich_theme()
