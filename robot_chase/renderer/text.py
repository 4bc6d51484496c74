"""Text renderer.

Draws the occupancy view of a :class:`robot_chase.state.Field` as a framed
block of characters: ``@`` player, ``+`` pursuer, ``*`` wreckage, blank
elsewhere. The result is plain text; terminal placement (``Field.origin``) is
left to the front-end.
"""

from typing import Dict, List, Optional

from robot_chase.state import Field
from robot_chase.types import EntityKind

GlyphMap = Dict[EntityKind, str]

DEFAULT_GLYPHS: GlyphMap = {
    EntityKind.PLAYER: "@",
    EntityKind.PURSUER: "+",
    EntityKind.WRECKAGE: "*",
    EntityKind.EMPTY: " ",
}


class TextRenderer:
    """Render fields to text with a configurable glyph map."""

    def __init__(
        self,
        glyphs: Optional[GlyphMap] = None,
        horizontal: str = "-",
        vertical: str = "|",
    ) -> None:
        self.glyphs = dict(DEFAULT_GLYPHS if glyphs is None else glyphs)
        self.horizontal = horizontal
        self.vertical = vertical

    def render_lines(self, field: Field) -> List[str]:
        """Return the framed field, one string per screen row."""
        frame = self.horizontal * (field.width + 2)
        rows = [
            self.vertical + "".join(self.glyphs[kind] for kind in row) + self.vertical
            for row in field.occupancy
        ]
        return [frame, *rows, frame]

    def render(self, field: Field) -> str:
        return "\n".join(self.render_lines(field))
