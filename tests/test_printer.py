from mondrian_grid import format_scene, regenerate
from mondrian_grid.printer import numbers_str, rect_str
from mondrian_grid.geometry import Rect


def test_format_scene_summary_lines():
    scene = regenerate(seed=8)
    text = format_scene(scene)
    lines = text.splitlines()

    assert lines[0] == "canvas 900.00x900.00 grid 10x10 seed=8"
    assert lines[1].startswith("columns [")
    assert "connectors 12" in lines
    assert any(line.startswith("agents ") for line in lines)
    assert len(lines) == 9


def test_verbose_lists_every_item():
    scene = regenerate(seed=8)
    lines = format_scene(scene, verbose=True).splitlines()
    expected = 9 + len(scene.connectors) + len(scene.blocks) + len(scene.agents)
    assert len(lines) == expected
    assert sum(1 for line in lines if line.startswith("  connector ")) == 12


def test_number_helpers():
    assert numbers_str([1, 2.5]) == "[1.00, 2.50]"
    assert rect_str(Rect(0.0, 1.5, 10.0, 2.25)) == "(0.00, 1.50) 10.00x2.25"
