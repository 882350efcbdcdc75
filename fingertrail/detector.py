import logging
import time
from typing import List

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_python
from mediapipe.tasks.python import vision as mp_vision

from .errors import ModelLoadError
from .tracker import Region

logger = logging.getLogger(__name__)


def create_detector(model_path: str, score_threshold: float = 0.5, max_results: int = 20):
    logger.info("Loading object detector %s...", model_path)
    try:
        base_options = mp_python.BaseOptions(model_asset_path=model_path)
        options = mp_vision.ObjectDetectorOptions(
            base_options=base_options,
            running_mode=mp_vision.RunningMode.VIDEO,
            score_threshold=score_threshold,
            max_results=max_results,
        )
        detector = mp_vision.ObjectDetector.create_from_options(options)
    except Exception as e:
        raise ModelLoadError(f"Failed to load object detector {model_path}: {e}") from e
    logger.info("Object detector loaded")
    return detector


def to_regions(result) -> List[Region]:
    """
    ObjectDetectorResult -> Region 리스트 (검출기 순서 유지, detection 당 top category)
    """
    regions = []
    if result is None:
        return regions
    for det in result.detections:
        if not det.categories:
            continue
        cat = det.categories[0]
        bb = det.bounding_box
        regions.append(Region(
            label=cat.category_name,
            bbox=(float(bb.origin_x), float(bb.origin_y), float(bb.width), float(bb.height)),
            score=float(cat.score) if cat.score is not None else 1.0,
        ))
    return regions


class ObjectDetectorAdapter:
    """detect(frame_bgr) -> list[Region]. VIDEO 모드라 timestamp 는 단조 증가해야 함"""

    def __init__(self, detector, session_t0: float = None):
        self.detector = detector
        self.session_t0 = time.monotonic() if session_t0 is None else session_t0
        self._last_ts = -1

    def _timestamp_ms(self) -> int:
        ts_ms = int((time.monotonic() - self.session_t0) * 1000)
        if ts_ms <= self._last_ts:
            ts_ms = self._last_ts + 1
        self._last_ts = ts_ms
        return ts_ms

    def detect(self, frame_bgr) -> List[Region]:
        rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
        result = self.detector.detect_for_video(mp_image, self._timestamp_ms())
        return to_regions(result)

    def close(self):
        self.detector.close()


def warmup(source, adapter: ObjectDetectorAdapter, n_grab: int = 10, n_warm: int = 5):
    for _ in range(n_grab):
        source.cap.grab()
    for _ in range(n_warm):
        ok, f = source.read()
        if not ok:
            break
        try:
            adapter.detect(f)
        except Exception:
            logger.debug("Warmup detection failed", exc_info=True)
