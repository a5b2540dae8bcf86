"""Exceptions raised by easing_gradients."""


class EasingGradientError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedCurveError(EasingGradientError, ValueError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Sorry, easing gradient does not support {name}.")


class InvalidPrecisionError(EasingGradientError, ValueError):
    pass


class SamplerConvergenceError(EasingGradientError, RuntimeError):
    """The adaptive sampler did not settle within its iteration bound."""


class GradientSyntaxError(EasingGradientError, ValueError):
    pass
