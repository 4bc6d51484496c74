from robot_chase.renderer import TextRenderer
from robot_chase.types import EntityKind
from tests.test_utils import make_field


def test_render_frames_field_with_glyphs() -> None:
    field = make_field(
        player=(1, 0), pursuers=[(0, 1)], wreckage=[(2, 1)], width=3, height=2
    )
    assert TextRenderer().render_lines(field) == [
        "-----",
        "| @ |",
        "|+ *|",
        "-----",
    ]


def test_render_joins_lines() -> None:
    field = make_field(player=(0, 0), width=1, height=1)
    assert TextRenderer().render(field) == "---\n|@|\n---"


def test_custom_glyphs() -> None:
    glyphs = {
        EntityKind.PLAYER: "P",
        EntityKind.PURSUER: "R",
        EntityKind.WRECKAGE: "#",
        EntityKind.EMPTY: ".",
    }
    field = make_field(player=(0, 0), pursuers=[(1, 0)], width=3, height=1)
    renderer = TextRenderer(glyphs=glyphs, horizontal="=", vertical="!")
    assert renderer.render(field) == "=====\n!PR.!\n====="
