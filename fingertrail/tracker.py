import logging
import time
from collections import deque
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


class Region(NamedTuple):
    """검출기 출력 1개: label + bbox (x, y, w, h), 원본 프레임 픽셀 좌표"""
    label: str
    bbox: Tuple[float, float, float, float]
    score: float = 1.0


def select_region(regions: Iterable[Region], preferred: Sequence[str], fallback: Optional[str]) -> Optional[Region]:
    """
    preferred 라벨이 하나라도 있으면 그 중 첫 번째, 없으면 fallback 라벨의 첫 번째.
    리스트 순서보다 preferred 우선순위가 먼저다.
    """
    regions = list(regions)
    for r in regions:
        if r.label in preferred:
            return r
    if fallback is None:
        return None
    for r in regions:
        if r.label == fallback:
            return r
    return None


def fingertip_from_bbox(bbox, frame_width: float, offset_ratio: float = 0.1) -> Point:
    # front camera -> x 좌우 반전, y 는 bbox 상단에서 살짝 아래
    x, y, w, h = bbox
    return Point(frame_width - (x + w / 2), y + h * offset_ratio)


class Trail:
    """최근 경로 (oldest first). capacity 를 넘으면 가장 오래된 점부터 버린다."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._points = deque(maxlen=capacity)

    def append(self, p: Point):
        self._points.append(p)

    def reset(self):
        self._points.clear()

    def points(self) -> List[Point]:
        return list(self._points)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class DetectionThrottle:
    """
    최소 간격(ms)보다 자주 들어온 요청은 그냥 skip (queue/debounce 없음).
    last_ms 는 실제로 검출을 수행한 시점만 기록한다.
    """

    def __init__(self, interval_ms: float, clock: Callable[[], float] = _now_ms):
        self.interval_ms = interval_ms
        self.clock = clock
        self.last_ms = 0.0

    def ready(self) -> bool:
        now = self.clock()
        if now - self.last_ms < self.interval_ms:
            return False
        self.last_ms = now
        return True


class FingertipTracker:
    """
    - 검출 결과를 받아 trail 갱신만 담당 (세션 단위 상태)
    - 카메라/모델/렌더링은 외부에서 처리
    """
    def __init__(self, cfg, clock: Callable[[], float] = _now_ms):
        self.cfg = cfg
        self.trail = Trail(cfg.max_trail_length)
        self.throttle = DetectionThrottle(cfg.detection_interval_ms, clock)
        self.passes = 0

    def clear(self):
        self.trail.reset()
        logger.info("Trail cleared")

    def apply(self, regions, frame_width: float) -> Optional[Point]:
        region = select_region(regions, self.cfg.preferred_labels, self.cfg.fallback_label)
        if region is None:
            # 대상이 사라졌다 다시 나타날 때 옛 trail 과 직선으로 이어지지 않게
            if len(self.trail) > 0:
                self.trail.reset()
                logger.debug("No qualifying region, trail discarded")
            return None

        p = fingertip_from_bbox(region.bbox, frame_width, self.cfg.tip_offset_ratio)
        self.trail.append(p)
        logger.debug("Fingertip (%s, score %.2f) at %.1f, %.1f", region.label, region.score, p.x, p.y)
        return p

    def step(self, detect_fn, frame, frame_width: float, source_ready: bool = True) -> bool:
        """
        returns: 이번 tick 에 검출을 실제로 수행했는지
        """
        if not source_ready:
            return False
        if not self.throttle.ready():
            return False

        self.passes += 1
        try:
            regions = detect_fn(frame)
        except Exception:
            logger.exception("Error during detection (pass %d)", self.passes)
            regions = []

        self.apply(regions, frame_width)
        return True
