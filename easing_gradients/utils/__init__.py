from .num_utils import round_to, format_number, get_percentage, is_close_to_int

# color_utils depends on ..colors, which depends on num_utils; import it directly.
__all__ = [
    "round_to",
    "format_number",
    "get_percentage",
    "is_close_to_int",
]
