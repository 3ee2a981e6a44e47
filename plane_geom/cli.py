"""Command-line interface for plane-geom."""

import logging
import sys
import click

from . import __version__
from .config import RegionType, StartDirection, DEFAULT_REGION_RADIUS, DEFAULT_REGION_TYPE
from .errors import InvalidArgumentError
from .geometry import (
    Point,
    PointInfo,
    angle_to_x_axis,
    distance_between_points,
    distance_to_line,
    distance_to_segment,
    nearest_point,
    point_in_region,
    point_on_any_node,
    point_on_circle,
)
from .log import setup_logging


class PointType(click.ParamType):
    """Click parameter for points written as ``X,Y``."""
    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, Point):
            return value
        parts = value.split(',')
        if len(parts) != 2:
            self.fail(f"{value!r} is not a point, expected X,Y", param, ctx)
        try:
            return Point(float(parts[0]), float(parts[1]))
        except ValueError:
            self.fail(f"{value!r} has non-numeric coordinates", param, ctx)


POINT = PointType()

region_options = [
    click.option('--radius', '-r', default=DEFAULT_REGION_RADIUS, type=float, show_default=True,
                 help='Region radius (half-width for squares)'),
    click.option('--type', '-t', 'region_type', default=DEFAULT_REGION_TYPE.value,
                 type=click.Choice([t.value for t in RegionType]), show_default=True,
                 help='Region shape'),
]


def with_region_options(func):
    for option in reversed(region_options):
        func = option(func)
    return func


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float, without a trailing .0"""
    text = repr(float(value) + 0.0)
    return text[:-2] if text.endswith(".0") else text


def echo_point_info(info: PointInfo) -> None:
    click.echo(f"{info.index} {format_number(info.data.x)} {format_number(info.data.y)}")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose):
    """plane-geom: 2D geometry helpers.

    Points are written as X,Y. Negative coordinates need a leading --
    to stop option parsing, for example:

        plane-geom distance -- -1,2 3,4
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument('p1', type=POINT)
@click.argument('p2', type=POINT)
def distance(p1, p2):
    """Euclidean distance between two points."""
    click.echo(format_number(distance_between_points(p1, p2)))


@main.command()
@click.argument('point', type=POINT)
@click.argument('start', type=POINT)
@click.argument('end', type=POINT)
def segment(point, start, end):
    """Distance from POINT to the segment START-END."""
    click.echo(format_number(distance_to_segment(point, start, end)))


@main.command()
@click.argument('point', type=POINT)
@click.argument('start', type=POINT)
@click.argument('end', type=POINT)
def line(point, start, end):
    """Distance from POINT to the infinite line through START and END."""
    click.echo(format_number(distance_to_line(point, start, end)))


@main.command()
@click.argument('p1', type=POINT)
@click.argument('p2', type=POINT)
@click.option('--direction', is_flag=True,
              help='Reflect left-pointing rays to 180 - angle')
def angle(p1, p2, direction):
    """Angle in degrees between the ray P1 -> P2 and the x-axis."""
    click.echo(angle_to_x_axis(p1, p2, is_direction=direction))


@main.command()
@click.argument('center', type=POINT)
@click.argument('angle', type=float)
@click.argument('radius', type=float)
@click.option('--start', '-s', 'start_direction', default=StartDirection.RIGHT.value,
              type=click.Choice([d.value for d in StartDirection]), show_default=True,
              help='Direction the angle is measured from')
@click.option('--clockwise', is_flag=True, help='Measure the angle clockwise')
def circle(center, angle, radius, start_direction, clockwise):
    """Offset of the point ANGLE degrees round a circle of RADIUS.

    The offset is relative to CENTER; CENTER itself is not added.
    """
    p = point_on_circle(center, angle, radius, start_direction, clockwise)
    click.echo(f"{format_number(p.x)} {format_number(p.y)}")


@main.command()
@click.argument('point', type=POINT)
@click.argument('area', type=POINT)
@with_region_options
def region(point, area, radius, region_type):
    """Check whether POINT lies in the region around AREA."""
    click.echo('true' if point_in_region(point, area, radius, region_type) else 'false')


@main.command()
@click.argument('point', type=POINT)
@click.argument('candidates', type=POINT, nargs=-1)
def nearest(point, candidates):
    """Closest of CANDIDATES to POINT, printed as INDEX X Y."""
    try:
        info = nearest_point(point, candidates)
    except InvalidArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    echo_point_info(info)


@main.command()
@click.argument('point', type=POINT)
@click.argument('candidates', type=POINT, nargs=-1)
@with_region_options
def node(point, candidates, radius, region_type):
    """Last of CANDIDATES whose region contains POINT, printed as INDEX X Y.

    Prints -1 0 0 when POINT is on no node.
    """
    echo_point_info(point_on_any_node(point, candidates, radius, region_type))


if __name__ == '__main__':
    main()
