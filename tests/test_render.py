import cv2
import numpy as np

from fingertrail.compose import compose_frame, compose_notice
from fingertrail.render import CanvasSurface, StrokeStyle, render_trail
from fingertrail.tracker import Point, Trail


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def clear(self, w, h):
        self.calls.append(("clear", w, h))

    def draw_polyline(self, points, style):
        self.calls.append(("polyline", list(points), style))


def make_trail(points, capacity=50):
    trail = Trail(capacity)
    for p in points:
        trail.append(Point(*p))
    return trail


def test_no_line_for_empty_or_single_point_trail():
    for pts in ([], [(10, 10)]):
        surface = RecordingSurface()
        assert not render_trail(surface, make_trail(pts), StrokeStyle(), 640, 480)
        assert surface.calls == [("clear", 640, 480)]


def test_single_polyline_in_insertion_order():
    surface = RecordingSurface()
    pts = [(1, 2), (3, 4), (5, 6)]
    style = StrokeStyle()
    assert render_trail(surface, make_trail(pts), style, 640, 480)
    assert surface.calls == [
        ("clear", 640, 480),
        ("polyline", [Point(1, 2), Point(3, 4), Point(5, 6)], style),
    ]


def test_render_does_not_mutate_trail():
    trail = make_trail([(1, 2), (3, 4)])
    render_trail(RecordingSurface(), trail, StrokeStyle(), 640, 480)
    assert trail.points() == [Point(1, 2), Point(3, 4)]


def test_canvas_surface_draws_and_clears():
    surface = CanvasSurface(100, 80)
    style = StrokeStyle(color=(255, 255, 0), thickness=3, line_type=cv2.LINE_8)
    render_trail(surface, make_trail([(10, 40), (90, 40)]), style, 100, 80)
    assert surface.image[40, 50].tolist() == [255, 255, 0]

    render_trail(surface, make_trail([(10, 40)]), style, 100, 80)
    assert not surface.image.any()


def test_canvas_surface_resizes_on_clear():
    surface = CanvasSurface(100, 80)
    surface.clear(64, 48)
    assert surface.image.shape == (48, 64, 3)


def test_compose_frame_mirrors_and_overlays():
    frame = np.zeros((20, 30, 3), dtype=np.uint8)
    frame[:, :5] = (0, 0, 200)  # left strip
    overlay = np.zeros_like(frame)
    overlay[10, 15] = (255, 255, 0)

    out = compose_frame(frame, overlay)
    assert out[0, 29].tolist() == [0, 0, 200]
    assert out[0, 0].tolist() == [0, 0, 0]
    assert out[10, 15].tolist() == [255, 255, 0]
    # input untouched
    assert frame[10, 15].tolist() == [0, 0, 0]


def test_compose_notice_size():
    img = compose_notice("Error accessing webcam", 400, 200)
    assert img.shape == (200, 400, 3)
    assert img.dtype == np.uint8
