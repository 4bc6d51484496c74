from .text import DEFAULT_GLYPHS, TextRenderer

__all__ = ["DEFAULT_GLYPHS", "TextRenderer"]
