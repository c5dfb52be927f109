"""User-configurable display settings."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.render import GlyphStyle, RenderOptions


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    glyphs: GlyphStyle = "unicode"
    show_coordinates: bool = True
    light_square: str = "#f0d9b5"
    dark_square: str = "#b58863"

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            glyphs=self.glyphs,
            show_coordinates=self.show_coordinates,
            light_square=self.light_square,
            dark_square=self.dark_square,
        )
