from dataclasses import dataclass

import numpy as np
import cv2


@dataclass(frozen=True)
class StrokeStyle:
    color: tuple = (255, 255, 0)  # BGR aqua
    thickness: int = 5
    line_type: int = cv2.LINE_AA


class CanvasSurface:
    """trail 을 그리는 overlay (BGR, 검정 = 투명)"""

    def __init__(self, width: int, height: int):
        self.image = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, width: int, height: int):
        h, w = self.image.shape[:2]
        if (w, h) != (width, height):
            self.image = np.zeros((height, width, 3), dtype=np.uint8)
        else:
            self.image[:] = 0

    def draw_polyline(self, points, style: StrokeStyle):
        pts = np.round(np.array(points, dtype=np.float32)).astype(np.int32).reshape(-1, 1, 2)
        cv2.polylines(self.image, [pts], False, style.color, style.thickness, style.line_type)


def render_trail(surface, trail, style: StrokeStyle, width: int, height: int) -> bool:
    """
    매 프레임: surface 전체를 지우고, 점이 2개 이상이면 polyline 하나를 그린다.
    trail 은 읽기만 함.
    returns: line 을 그렸는지
    """
    surface.clear(width, height)
    pts = list(trail)
    if len(pts) < 2:
        return False
    surface.draw_polyline(pts, style)
    return True
