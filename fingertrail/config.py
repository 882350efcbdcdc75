from dataclasses import dataclass

@dataclass(frozen=True)
class Config:
    # Paths
    model_task_path: str = "efficientdet_lite0.tflite"

    # Model
    score_threshold: float = 0.5
    max_results: int = 20

    # Camera
    cam_index: int = 0
    cam_width: int = 640
    cam_height: int = 480
    cam_buffer_size: int = 1  # backend에 따라 무시될 수 있음

    # Trail
    max_trail_length: int = 50
    detection_interval_ms: float = 100.0  # 10 FPS detection

    # Fingertip heuristic
    preferred_labels: tuple = ("person", "hand")
    fallback_label: str = "sports ball"
    tip_offset_ratio: float = 0.1

    # Render (BGR)
    stroke_color: tuple = (255, 255, 0)
    stroke_thickness: int = 5

    # UI
    window_cam: str = "FingerTrail (C=clear, P=pause, ESC=quit)"
    clear_key: str = "c"
    pause_key: str = "p"

    # Logging
    log_level: str = "INFO"


CFG = Config()
