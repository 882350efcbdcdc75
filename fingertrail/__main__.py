import argparse
import dataclasses
import logging
import sys

from .config import CFG
from .errors import FingertrailError


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="fingertrail",
        description="Webcam fingertip trail drawing with an object detector",
    )
    parser.add_argument("--camera", type=int, default=CFG.cam_index, help="Camera index")
    parser.add_argument("--width", type=int, default=CFG.cam_width)
    parser.add_argument("--height", type=int, default=CFG.cam_height)
    parser.add_argument("--model", default=CFG.model_task_path,
                        help="MediaPipe object detector model (.tflite)")
    parser.add_argument("--interval-ms", type=float, default=CFG.detection_interval_ms,
                        help="Minimum interval between detection passes")
    parser.add_argument("--max-trail", type=positive_int, default=CFG.max_trail_length)
    parser.add_argument("--score-threshold", type=float, default=CFG.score_threshold)
    parser.add_argument("--log-level", default=CFG.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args):
    return dataclasses.replace(
        CFG,
        cam_index=args.camera,
        cam_width=args.width,
        cam_height=args.height,
        model_task_path=args.model,
        detection_interval_ms=args.interval_ms,
        max_trail_length=args.max_trail,
        score_threshold=args.score_threshold,
        log_level=args.log_level,
    )


def main(argv=None) -> int:
    cfg = build_config(parse_args(argv))
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # cv2/mediapipe 는 실제 실행할 때만 로드
    from .app import run_app

    try:
        run_app(cfg)
    except FingertrailError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
