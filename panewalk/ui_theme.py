"""UI theme definitions and selection helpers.

Themes are ANSI SGR palettes keyed by what a cell shows: entry kinds, the
selection highlight, header rows and the permission-denied notice.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the compositor."""

    name: str
    reset: str
    header: str
    metadata: str
    directory: str
    symlink: str
    regular: str
    selected: str
    denied: str

    def style_for_kind(self, kind: EntryKind) -> str:
        """Return the style used for an unselected entry of ``kind``."""
        if kind is EntryKind.DIRECTORY:
            return self.directory
        if kind is EntryKind.SYMLINK:
            return self.symlink
        return self.regular


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;32m",
    metadata="\033[2;37m",
    directory="\033[1;34m",
    symlink="\033[1;36m",
    regular="\033[1;37m",
    selected="\033[7m",
    denied="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    metadata="\033[2;38;5;110m",
    directory="\033[1;38;5;39m",
    symlink="\033[38;5;117m",
    regular="\033[38;5;252m",
    selected="\033[7m",
    denied="\033[1;38;5;203m",
)

# Reverse video is kept so the cursor stays visible without colors.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    header="",
    metadata="",
    directory="",
    symlink="",
    regular="",
    selected="\033[7m",
    denied="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode.

    Unknown or empty names fall back to the default palette.
    """
    if no_color:
        return PLAIN_THEME
    candidate = (name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
