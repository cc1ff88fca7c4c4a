import numpy as np
from PIL import Image


def new_buffer(width: int, height: int) -> np.ndarray:
    """(height, width, 3) float 버퍼, 행 우선"""
    return np.zeros((height, width, 3), dtype=np.float64)


def to_rgb8(buffer: np.ndarray) -> np.ndarray:
    # 채널마다 [0, 1]로 자른 뒤 255 스케일, 0.5는 올림
    return np.floor(np.clip(buffer, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)


def save_ppm(path: str, buffer: np.ndarray):
    """바이너리 PPM(P6) 저장: "P6\\n{w} {h}\\n255\\n" + 픽셀당 RGB 3바이트"""
    Image.fromarray(to_rgb8(buffer)).save(path, format="PPM")


def save_image(path: str, buffer: np.ndarray):
    """확장자로 형식을 고른다 (.png 미리보기 등)"""
    if str(path).lower().endswith(".ppm"):
        save_ppm(path, buffer)
    else:
        Image.fromarray(to_rgb8(buffer)).save(path)
