import pytest

from hyperview.model import colors
from hyperview.model.edges import Edge
from hyperview.model.objects import Object4D
from hyperview.model.scene import Scene
from hyperview.model.shapes import HypersphereParams, PentachoronParams, TesseractParams, ToratopeParams
from hyperview.model.vectors import Vector2D
from hyperview.rendering.camera import Camera4D
from hyperview.rendering.renderer import Renderer
from hyperview.rendering.surface import DrawingSurface


@pytest.fixture
def renderer():
    camera = Camera4D()
    camera.set_screen_parameters(800, 600)
    return Renderer(camera)


def test_recording_surface_satisfies_protocol(surface):
    assert isinstance(surface, DrawingSurface)


def test_tesseract_draws_edges_centroid_and_label(renderer, surface):
    obj = Object4D(TesseractParams())
    renderer.render_object(surface, obj)

    assert len(surface.of("line")) == 32
    (center, color, size), = surface.of("point")
    assert color == colors.MAGENTA and size == 5
    (text, position, _), = surface.of("text")
    assert text == "Tesseract"
    assert position == center.offset(dy=-30)


def test_invalid_edges_are_skipped(renderer, surface):
    obj = Object4D(TesseractParams())
    obj.edges.append(Edge(0, 99))
    obj.edges.append(Edge(-1, 3))
    renderer.render_object(surface, obj)
    assert len(surface.of("line")) == 32


def test_edge_colors_are_passed_through(renderer, surface):
    obj = Object4D(TesseractParams())
    renderer.render_object(surface, obj)
    assert [args[2] for args in surface.of("line")] == [e.color for e in obj.edges]


def test_pentachoron_marks_vertices(renderer, surface):
    obj = Object4D(PentachoronParams())
    renderer.render_object(surface, obj)

    assert len(surface.of("line")) == 10
    vertex_points = [args for args in surface.of("point") if args[2] == 7]
    assert len(vertex_points) == 5
    assert surface.texts == ["V1", "V2", "V3", "V4", "V5", obj.name]


def test_toratope_and_hypersphere_labels(renderer, surface):
    renderer.render_object(surface, Object4D(ToratopeParams(resolution=8)))
    assert surface.texts == ["4D Torus"]

    surface.calls.clear()
    renderer.render_object(surface, Object4D(HypersphereParams(radius=0.7, resolution=8)))
    assert surface.texts == []
    assert len(surface.of("point")) == 1


def test_render_scene_draws_selected_only_by_default(renderer, surface):
    scene = Scene()
    scene.add(Object4D(TesseractParams()))
    scene.add(Object4D(PentachoronParams()))
    scene.select(1)

    renderer.render_scene(surface, scene)
    assert len(surface.of("line")) == 10

    surface.calls.clear()
    renderer.render_scene(surface, scene, render_all=True)
    assert len(surface.of("line")) == 42


def test_overlay_lines_are_stacked(surface):
    Renderer.draw_overlay(surface, ["a", "b", "c"], Vector2D(10, 10))
    positions = [args[1] for args in surface.of("text")]
    assert positions == [Vector2D(10, 10), Vector2D(10, 30), Vector2D(10, 50)]
