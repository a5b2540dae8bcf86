from .easing import SCRIM_COORDINATES, EASING_CLASSES, get_easing_function, ease, sample_curve
from .sampler import SamplerSettings, DEFAULT_SAMPLER_SETTINGS, get_coordinates, is_far_enough

__all__ = [
    "SCRIM_COORDINATES",
    "EASING_CLASSES",
    "get_easing_function",
    "ease",
    "sample_curve",
    "SamplerSettings",
    "DEFAULT_SAMPLER_SETTINGS",
    "get_coordinates",
    "is_far_enough",
]
