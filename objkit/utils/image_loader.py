"""
Декодирует PNG/JPG/... через Pillow → ImageBuffer (байты + размеры).
"""

from pathlib import Path
from PIL import Image, UnidentifiedImageError
import numpy as np
from objkit.errors import ImageDecodeError
from objkit.utils.logger import logger


class ImageBuffer:
    """Пиксели текстуры (uint8, строка за строкой) + размеры и число каналов."""

    __slots__ = ("name", "data", "width", "height", "channels")

    def __init__(self, name: str, data: bytes, width: int, height: int, channels: int):
        self.name = name
        self.data = data
        self.width = width
        self.height = height
        self.channels = channels

    def as_np(self) -> np.ndarray:
        """Вид (height, width, channels) на буфер, без копирования."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            (self.height, self.width, self.channels)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return (self.name, self.width, self.height, self.channels, self.data) == (
            other.name, other.width, other.height, other.channels, other.data
        )

    def __repr__(self) -> str:
        return f"ImageBuffer({self.name!r}, {self.width}x{self.height}x{self.channels})"


def decode_image(path: str, flip: bool = True) -> ImageBuffer:
    """
    Загружает изображение, сохраняя исходное число каналов
    (L → 1, LA → 2, RGB → 3, RGBA → 4). Палитровые и прочие режимы
    приводятся к RGB/RGBA.

    При `flip=True` строки переворачиваются: первая строка буфера –
    нижняя строка картинки (так ожидают GPU‑текстуры).
    """
    p = Path(path).expanduser()
    if not p.is_file():
        raise ImageDecodeError(f"Texture not found: {p}")

    try:
        with Image.open(p) as img:
            if img.mode not in ("L", "LA", "RGB", "RGBA"):
                has_alpha = "A" in img.getbands() or "transparency" in img.info
                img = img.convert("RGBA" if has_alpha else "RGB")
            pixels = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"Failed to decode texture {p}: {exc}") from exc

    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    if flip:
        pixels = np.flipud(pixels)

    h, w, channels = pixels.shape
    logger.debug(f"[ImageLoader] Decoded texture {p} ({w}x{h}x{channels})")
    return ImageBuffer(
        name=p.name,
        data=np.ascontiguousarray(pixels).tobytes(),
        width=w,
        height=h,
        channels=channels,
    )
