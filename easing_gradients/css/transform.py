from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import tinycss2
from tinycss2.ast import DimensionToken, FunctionBlock, IdentToken, Node, ParseError

from ..errors import GradientSyntaxError
from ..gradients.color_stops import DEFAULT_OPTIONS, GradientOptions, get_color_stops
from ..types.curve_types import SUPPORTED_GRADIENTS, is_easing_gradient
from ..utils.color_utils import is_same_color

ANGLE_UNITS = frozenset({"deg", "grad", "rad", "turn"})


def _split_arguments(arguments: Sequence[Node]) -> List[List[Node]]:
    """Split function arguments on top-level commas, dropping whitespace and comments at the edges."""
    groups: List[List[Node]] = [[]]
    for token in arguments:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        elif token.type != "comment":
            groups[-1].append(token)
    for group in groups:
        while group and group[0].type == "whitespace":
            group.pop(0)
        while group and group[-1].type == "whitespace":
            group.pop()
    return groups


def _is_direction(group: Sequence[Node]) -> bool:
    first = group[0]
    if isinstance(first, IdentToken):
        return first.lower_value == "to"
    return isinstance(first, DimensionToken) and first.lower_unit in ANGLE_UNITS


def parse_gradient_arguments(arguments: Sequence[Node]) -> Tuple[Optional[str], List[str]]:
    """
    Read the arguments of an easing gradient call.

    Accepts ``[direction,] start_color, end_color`` where direction is
    ``to <side>`` or an angle.

    Returns:
        ``(direction or None, [start_color, end_color])`` as CSS text.

    Raises:
        GradientSyntaxError: On any other argument shape.
    """
    groups = _split_arguments(arguments)
    if any(not group for group in groups):
        raise GradientSyntaxError(f"Empty argument in {tinycss2.serialize(arguments)!r}")

    direction = None
    if len(groups) == 3:
        if not _is_direction(groups[0]):
            raise GradientSyntaxError(
                f"Expected a direction ('to <side>' or an angle), got {tinycss2.serialize(groups[0])!r}"
            )
        direction = tinycss2.serialize(groups.pop(0))
    if len(groups) != 2 or _is_direction(groups[0]):
        raise GradientSyntaxError(
            f"Expected two colors, got {tinycss2.serialize(arguments).strip()!r}"
        )
    return direction, [tinycss2.serialize(group) for group in groups]


def _gradient_to_linear(node: FunctionBlock, options: GradientOptions) -> str:
    direction, colors = parse_gradient_arguments(node.arguments)
    prefix = f"{direction}, " if direction else ""
    # nothing to ease between identical colors
    if is_same_color(*colors):
        stops = ", ".join(colors)
    else:
        stops = get_color_stops(colors, node.lower_name, options.precision, options.alpha_decimals)
    return f"linear-gradient({prefix}{stops})"


def _rewrite_nodes(nodes: Sequence[Node], options: GradientOptions) -> List[Node]:
    rewritten: List[Node] = []
    for node in nodes:
        if isinstance(node, FunctionBlock) and node.lower_name in SUPPORTED_GRADIENTS:
            linear = _gradient_to_linear(node, options)
            rewritten.extend(tinycss2.parse_component_value_list(linear))
            continue
        if isinstance(node, FunctionBlock):
            node.arguments = _rewrite_nodes(node.arguments, options)
        elif isinstance(getattr(node, "content", None), list):
            node.content = _rewrite_nodes(node.content, options)
        rewritten.append(node)
    return rewritten


def rewrite_value(value: str, options: GradientOptions = DEFAULT_OPTIONS) -> str:
    """
    Rewrite every easing gradient call in a declaration value.

    >>> rewrite_value("ease-in-sine-gradient(45deg, red, red), url(a.png)")
    'linear-gradient(45deg, red, red), url(a.png)'

    Values without an easing gradient are returned unchanged.
    """
    if not is_easing_gradient(value):
        return value
    nodes = tinycss2.parse_component_value_list(value)
    return tinycss2.serialize(_rewrite_nodes(nodes, options))


def rewrite_stylesheet(css: str, options: GradientOptions = DEFAULT_OPTIONS) -> str:
    """
    Rewrite every easing gradient call inside the rule blocks of a stylesheet.

    Selectors, at-rule preludes, comments and whitespace are kept as written.

    Raises:
        GradientSyntaxError: If the stylesheet itself cannot be parsed, or a
            gradient call is malformed.
    """
    if not is_easing_gradient(css):
        return css
    rules = tinycss2.parse_stylesheet(css, skip_comments=False, skip_whitespace=False)
    for rule in rules:
        if isinstance(rule, ParseError):
            raise GradientSyntaxError(f"Invalid stylesheet at line {rule.source_line}: {rule.message}")
        if getattr(rule, "content", None) is not None:
            rule.content = _rewrite_nodes(rule.content, options)
    return tinycss2.serialize(rules)
