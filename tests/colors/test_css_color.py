import pytest

from easing_gradients.colors import CssColor

def test_parse_named_and_hex():
    assert CssColor("blue").rgba == (0.0, 0.0, 1.0, 1.0)
    assert CssColor("#ff0000").rgba == (1.0, 0.0, 0.0, 1.0)
    assert CssColor("rgb(255, 0, 0)").rgb == (1.0, 0.0, 0.0)

def test_parse_alpha():
    color = CssColor("rgba(0, 0, 0, 0.5)")
    assert color.alpha == 0.5
    assert color.has_alpha

def test_parse_transparent():
    assert CssColor("transparent").rgba == (0.0, 0.0, 0.0, 0.0)

def test_parse_invalid_color():
    with pytest.raises(ValueError):
        CssColor("not-a-color")

def test_tuple_input_is_clamped():
    assert CssColor((1.2, -0.1, 0.5)).rgba == (1.0, 0.0, 0.5, 1.0)
    assert CssColor((0.0, 0.0, 0.0, 0.25)).alpha == 0.25

def test_tuple_input_wrong_length():
    with pytest.raises(ValueError):
        CssColor((0.0, 0.0))

def test_copy_constructor():
    color = CssColor("rgba(0, 0, 255, 0.5)")
    assert CssColor(color).rgba == color.rgba

def test_immutable():
    color = CssColor("red")
    with pytest.raises(AttributeError):
        color._red = 0.5

def test_hsl_string():
    assert CssColor("blue").to_hsl_string() == "hsl(240, 100%, 50%)"
    assert CssColor("red").to_hsl_string() == "hsl(0, 100%, 50%)"
    assert CssColor("white").to_hsl_string() == "hsl(0, 0%, 100%)"

def test_hsla_string_when_not_opaque():
    assert CssColor("blue").with_alpha(0).to_hsl_string() == "hsla(240, 100%, 50%, 0)"
    assert CssColor("rgba(0, 0, 0, 0.5)").to_hsl_string() == "hsla(0, 0%, 0%, 0.5)"

def test_with_alpha_returns_new_color():
    color = CssColor("red")
    faded = color.with_alpha(0.25)
    assert faded.alpha == 0.25
    assert color.alpha == 1.0
    assert faded.rgb == color.rgb

def test_mix_halfway():
    mixed = CssColor("red").mix(CssColor("blue"), 0.5)
    assert mixed.rgb == (0.5, 0.0, 0.5)
    assert mixed.to_hsl_string() == "hsl(300, 100%, 25%)"

def test_mix_endpoints():
    red, blue = CssColor("red"), CssColor("blue")
    assert red.mix(blue, 0).rgba == red.rgba
    assert red.mix(blue, 1).rgba == blue.rgba

def test_mix_interpolates_alpha():
    start = CssColor("blue").with_alpha(0)
    end = CssColor("blue")
    mixed = start.mix(end, 0.25)
    assert mixed.alpha == 0.25
    # alpha-weighted channels stay on the opaque color
    assert mixed.rgb == end.rgb

def test_hsl():
    h, s, l = CssColor("lime").hsl()
    assert h == 120
    assert s == 1.0
    assert l == 0.5
