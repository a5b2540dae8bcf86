"""Basic easing_gradients usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from easing_gradients import (
    CssColor,
    GradientOptions,
    get_color_stops,
    get_coordinates,
    rewrite_stylesheet,
    rewrite_value,
)


def demonstrate_colors() -> None:
    # Parse any CSS notation, mix, and serialise as hsl().
    accent = CssColor("#ff8040")
    print("Accent as hsl:", accent.to_hsl_string())
    print("Halfway to navy:", accent.mix(CssColor("navy"), 0.5).to_hsl_string())


def demonstrate_coordinates() -> None:
    # Lower precision values keep more points of the curve.
    for precision in (0.3, 0.1, 0.05):
        coordinates = get_coordinates("ease-in-out-sine-gradient", precision)
        print(f"precision={precision}: {len(coordinates)} stops ->", list(coordinates.values()))


def demonstrate_gradients() -> None:
    stops = get_color_stops(["transparent", "rebeccapurple"], "ease-out-quad-gradient", 0.1, 3)
    print("Stop list:", stops)

    print(rewrite_value("scrim-gradient(to top, black, transparent)"))
    print(rewrite_value("ease-in-sine-gradient(45deg, red, blue)", GradientOptions(precision=0.2)))

    css = ".hero {\n  background-image: ease-in-out-quad-gradient(to bottom, #123, transparent);\n}\n"
    print(rewrite_stylesheet(css))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_coordinates()
    demonstrate_gradients()
