# renderer/tone_mapping.py
"""
Mapping of the linear float canvas to 8-bit RGB for image export.

Each mapper takes a (height, width, 3) array of linear radiance and returns a
uint8 array of the same shape.
"""
import numpy as np

# Rec. 709 luminance weights.
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

def _encode(mapped, gamma):
    if gamma != 1.0:
        mapped = mapped ** (1.0 / gamma)
    return np.rint(mapped * 255).clip(0, 255).astype(np.uint8)

def clamp_tone_mapping(linear, gamma=1.0):
    """
    Clamp each channel to [0, 1]. With gamma 1 a channel value c becomes
    round(255 * c), which is how the shader's colors are usually viewed.
    """
    return _encode(np.clip(linear, 0.0, 1.0), gamma)

def reinhard_tone_mapping(linear, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Reinhard operator c / (1 + c / white_point) after scaling by exposure.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    return _encode(scaled / (1.0 + scaled / white_point), gamma)

def auto_exposure_tone_mapping(linear, gamma=2.2, target_midgray=0.18):
    """
    Reinhard mapping with the exposure chosen so the mean luminance lands on
    target_midgray.
    """
    avg_lum = float((np.maximum(linear, 0.0) @ LUMINANCE_WEIGHTS).mean()) + 1e-5
    return reinhard_tone_mapping(linear, exposure=target_midgray / avg_lum, gamma=gamma)

TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
    "auto": auto_exposure_tone_mapping,
}
