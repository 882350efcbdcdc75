class FingertrailError(RuntimeError):
    """세션을 시작할 수 없는 치명적 오류 (재시도하지 않음)"""


class CameraError(FingertrailError):
    pass


class ModelLoadError(FingertrailError):
    pass
