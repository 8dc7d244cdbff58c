"""
Raster image probing for asset reports.

Decodes image bytes with OpenCV to read pixel dimensions. Vector and
unknown formats simply report no size.
"""

from typing import Optional, Tuple
import numpy as np

try:
    import cv2
    HAS_CV2 = True
except ImportError:
    HAS_CV2 = False


def probe_image_size(data: bytes) -> Optional[Tuple[int, int]]:
    """
    Read (width, height) of an encoded raster image.

    Args:
        data: Encoded image bytes (PNG, JPEG, WebP, ...)

    Returns:
        (width, height) in pixels, or None if OpenCV cannot decode it
    """
    if not HAS_CV2:
        raise ImportError("opencv-python is required for image probing. Install with: pip install opencv-python")

    if not data:
        return None
    buf = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    if image is None:
        return None
    height, width = image.shape[:2]
    return int(width), int(height)
