import numpy as np
import cv2

def compose_frame(frame_bgr, overlay, status_lines=()):
    """
    입력: 원본 카메라 프레임(BGR), trail overlay (이미 좌우 반전된 좌표계)
    출력: 거울 모드 프레임 + overlay + 상태 텍스트
    """
    out = cv2.flip(frame_bgr, 1)

    if overlay is not None and overlay.shape[:2] == out.shape[:2]:
        mask = overlay.any(axis=2)
        out[mask] = overlay[mask]

    y = 30
    for line in status_lines:
        cv2.putText(out, line, (10, y), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (50, 255, 50), 2)
        y += 30

    return out


def compose_notice(message: str, width: int = 800, height: int = 300):
    out = np.full((height, width, 3), 255, dtype=np.uint8)
    y = 80
    for line in message.splitlines() or [""]:
        cv2.putText(out, line, (20, y), cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 0, 0), 2)
        y += 40
    cv2.putText(out, "Press any key to close", (20, height - 30),
                cv2.FONT_HERSHEY_SIMPLEX, 0.7, (80, 80, 80), 2)
    return out
