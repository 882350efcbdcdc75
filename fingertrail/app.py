import logging

import cv2

from .config import CFG
from .camera import CameraSource
from .detector import create_detector, warmup, ObjectDetectorAdapter
from .errors import FingertrailError
from .tracker import FingertipTracker
from .render import CanvasSurface, StrokeStyle, render_trail
from .compose import compose_frame, compose_notice

logger = logging.getLogger(__name__)

NOTICE_WINDOW = "FingerTrail - Error"


def notify_fatal(message: str):
    """치명적 오류: 사용자에게 알리고 키 입력까지 대기"""
    logger.error(message)
    try:
        cv2.imshow(NOTICE_WINDOW, compose_notice(message))
        cv2.waitKey(0)
        cv2.destroyWindow(NOTICE_WINDOW)
    except cv2.error:
        # headless 환경
        pass


def run_app(cfg=CFG):
    source = None
    adapter = None
    try:
        source = CameraSource(cfg.cam_index, cfg.cam_width, cfg.cam_height, cfg.cam_buffer_size)
        detector = create_detector(cfg.model_task_path, cfg.score_threshold, cfg.max_results)
        adapter = ObjectDetectorAdapter(detector)
    except FingertrailError as e:
        notify_fatal(str(e))
        if source is not None:
            source.release()
        raise

    try:
        warmup(source, adapter)
        _loop(cfg, source, adapter)
    finally:
        try:
            cv2.destroyWindow(cfg.window_cam)
        except cv2.error:
            pass
        adapter.close()
        source.release()
        cv2.destroyAllWindows()


def _loop(cfg, source, adapter):
    tracker = FingertipTracker(cfg)
    style = StrokeStyle(cfg.stroke_color, cfg.stroke_thickness)
    surface = CanvasSurface(cfg.cam_width, cfg.cam_height)
    clear_key = ord(cfg.clear_key)
    pause_key = ord(cfg.pause_key)
    shown = False

    print(f"조작: {cfg.clear_key.upper()}=지우기, {cfg.pause_key.upper()}=일시정지/재개, ESC=종료")

    while True:
        ok, frame = source.read()
        if not ok and source.ended:
            logger.info("Camera stream ended")
            break

        if ok:
            h, w = frame.shape[:2]

            # detection tick (throttled, 한 번에 하나만)
            tracker.step(adapter.detect, frame, w, source_ready=source.is_ready(frame))

            # render tick
            render_trail(surface, tracker.trail, style, w, h)
            mode = "PAUSED" if source.paused else "TRACKING"
            out = compose_frame(frame, surface.image, [
                f"MODE: {mode}",
                f"Trail: {len(tracker.trail)}/{tracker.trail.capacity}",
            ])
            cv2.imshow(cfg.window_cam, out)
            shown = True

        key = cv2.waitKey(1) & 0xFF
        if key == 27:  # ESC
            break
        if key in (clear_key, ord(cfg.clear_key.upper())):
            tracker.clear()
        elif key in (pause_key, ord(cfg.pause_key.upper())):
            source.toggle_pause()

        if shown and cv2.getWindowProperty(cfg.window_cam, cv2.WND_PROP_VISIBLE) < 1:
            break

    logger.info("Exiting after %d detection passes", tracker.passes)
    return tracker
