# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit(cache=False)
def _gamma_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                # NaN and negative radiance both map to black.
                if not value > 0.0:
                    value = 0.0
                # Gamma 2 correction, clamped below 1.0
                value = math.sqrt(value)
                if value > 0.9999:
                    value = 0.9999
                output_image[y, x, c] = int(256.0 * value)

def gamma_tone_mapping(linear_image: np.ndarray) -> np.ndarray:
    """
    Convert averaged linear radiance to 8-bit RGB:
    channel = int(256 * clamp(sqrt(linear), 0, 0.9999)).
    """
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.zeros(linear.shape, dtype=np.uint8)
    _gamma_kernel(linear, output)
    return output
