from .color_stops import GradientOptions, DEFAULT_OPTIONS, get_color_stops, validate_alpha_decimals

__all__ = ["GradientOptions", "DEFAULT_OPTIONS", "get_color_stops", "validate_alpha_decimals"]
