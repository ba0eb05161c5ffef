"""Reconstruct drawable path commands from an arc endpoint sequence.

The output uses the move / line / elliptical-arc subset of the SVG path
grammar:

    M x,y
    L x,y
    A rx ry x-axis-rotation large-arc-flag sweep-flag x,y

Commands are grouped per sub-path. The large-arc flag is always 0: arcs
produced by ArcAccumulator are limited to |d| <= MAX_D and never exceed half
a circle, so the short arc is always the right one for them.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from arcglyph.domain import Arc, Endpoint, Point
from arcglyph.exceptions import InvariantViolationError

LARGE_ARC_FLAG = 0


def format_number(value: float) -> str:
    """Format a coordinate compactly (up to 6 decimals, no trailing zeros)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_point(x: float, y: float) -> str:
    """Format a coordinate pair as 'x,y'."""
    return f"{format_number(x)},{format_number(y)}"


def arc_to_svg_a(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    anticlockwise: bool,
) -> str:
    """Build an SVG elliptical-arc command for a circular arc.

    The start angle is accepted for symmetry with canvas-style arc calls; the
    command only needs the end point, which is recomputed from the center.

    Args:
        cx: Center x
        cy: Center y
        radius: Circle radius
        start_angle: Start angle in radians (unused by the command)
        end_angle: End angle in radians
        anticlockwise: Drawing direction

    Returns:
        Command string 'A r r 0 0 sweep x,y'
    """
    end_x = cx + radius * math.cos(end_angle)
    end_y = cy + radius * math.sin(end_angle)
    sweep_flag = 0 if anticlockwise else 1
    r = format_number(radius)
    return f"A {r} {r} 0 {LARGE_ARC_FLAG} {sweep_flag} {format_point(end_x, end_y)}"


@dataclass
class ArcCommands:
    """Path commands reconstructed from an endpoint sequence.

    Attributes:
        groups: One list of command strings per disconnected sub-path
        points: Every endpoint position, in sequence order
    """

    groups: list[list[str]] = field(default_factory=list)
    points: list[tuple[float, float]] = field(default_factory=list)

    def path_data(self) -> list[str]:
        """Join each group into a single path data string."""
        return [" ".join(group) for group in self.groups]

    @property
    def command_count(self) -> int:
        """Total number of commands over all groups."""
        return sum(len(group) for group in self.groups)


def to_arc_cmds(endpoints: Sequence[Endpoint]) -> ArcCommands:
    """Convert an endpoint sequence to grouped path commands.

    Repeated points (equal within EPSILON to the current point) are skipped,
    so no zero-length commands are emitted.

    Args:
        endpoints: Endpoint sequence; INFINITY d starts a sub-path, 0 is a
            straight segment, anything else an arc

    Returns:
        ArcCommands with the command groups and flat point list

    Raises:
        InvariantViolationError: If a line or arc appears before any move
    """
    commands = ArcCommands()
    group: list[str] = []
    current: Point | None = None

    for i, endpoint in enumerate(endpoints):
        p = endpoint.point
        commands.points.append((p.x, p.y))

        if endpoint.is_move():
            if current is None or not p.equals(current):
                if group:
                    commands.groups.append(group)
                    group = []
                group.append(f"M {format_point(p.x, p.y)}")
                current = p
            continue

        if current is None:
            kind = "Line" if endpoint.is_line() else "Arc"
            raise InvariantViolationError(f"{kind} endpoint without a current point", index=i)

        if p.equals(current):
            continue

        if endpoint.is_line():
            group.append(f"L {format_point(p.x, p.y)}")
        else:
            arc = Arc(current, p, endpoint.d)
            center = arc.center()
            radius = arc.radius()

            start_v = current - center
            end_v = p - center

            # Negative cross product: the arc turns anticlockwise
            cross = start_v.cross(end_v)

            group.append(
                arc_to_svg_a(
                    center.x,
                    center.y,
                    radius,
                    start_v.angle(),
                    end_v.angle(),
                    cross < 0.0,
                )
            )
        current = p

    if group:
        commands.groups.append(group)

    return commands
