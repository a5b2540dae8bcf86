import logging

import pytest

from easing_gradients import EasingCurve, SUPPORTED_GRADIENTS, is_easing_gradient, UnsupportedCurveError

def test_supported_gradients_cover_every_curve():
    assert len(SUPPORTED_GRADIENTS) == 7
    assert "scrim-gradient" in SUPPORTED_GRADIENTS
    assert all(name.endswith("-gradient") for name in SUPPORTED_GRADIENTS)

def test_is_easing_gradient():
    assert is_easing_gradient("ease-in-sine-gradient")
    assert is_easing_gradient("background: scrim-gradient(black, transparent)")
    assert not is_easing_gradient("linear-gradient")
    assert not is_easing_gradient("radial-gradient(red, blue)")

def test_is_easing_gradient_is_a_substring_match():
    assert is_easing_gradient("repeating-ease-in-sine-gradient")

def test_from_name():
    assert EasingCurve.from_name("ease-out-quad-gradient") is EasingCurve.EASE_OUT_QUAD
    assert EasingCurve.from_name("SCRIM-GRADIENT") is EasingCurve.SCRIM
    assert EasingCurve.from_name(EasingCurve.EASE_IN_SINE) is EasingCurve.EASE_IN_SINE

def test_from_name_unsupported_logs_and_raises(caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(UnsupportedCurveError) as excinfo:
            EasingCurve.from_name("linear-gradient")
    assert excinfo.value.name == "linear-gradient"
    assert "does not support linear-gradient" in caplog.text

def test_unsupported_curve_is_a_value_error():
    with pytest.raises(ValueError):
        EasingCurve.from_name("ease-in-cubic-gradient")

def test_is_easing_gradient_ignores_case():
    assert is_easing_gradient("Scrim-Gradient(black, transparent)")
