import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from .errors import CameraError

logger = logging.getLogger(__name__)


def frame_ready(frame) -> bool:
    return frame is not None and getattr(frame, "size", 0) > 0 and frame.shape[0] > 0 and frame.shape[1] > 0


class CameraSource:
    """USB/내장 웹캠. 열기 실패는 치명적 오류 (재시도 없음)"""

    def __init__(self, index: int = 0, width: int = 640, height: int = 480, buffer_size: int = 1):
        self.index = index
        self.cap = cv2.VideoCapture(index)
        if not self.cap.isOpened():
            raise CameraError(f"웹캠을 열 수 없습니다. (camera {index})")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        self.cap.set(cv2.CAP_PROP_BUFFERSIZE, buffer_size)

        self.paused = False
        self.ended = False
        self._last_frame: Optional[np.ndarray] = None

        logger.info("Opened camera %d (requested %dx%d)", index, width, height)

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        # paused: 마지막 프레임을 계속 보여줌
        if self.paused:
            return self._last_frame is not None, self._last_frame
        ok, frame = self.cap.read()
        if not ok:
            self.ended = True
            return False, None
        self._last_frame = frame
        return True, frame

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Camera %s", "paused" if self.paused else "resumed")
        return self.paused

    def is_ready(self, frame) -> bool:
        return not self.paused and not self.ended and frame_ready(frame)

    def release(self):
        self.cap.release()
