"""CLI for turtlesoup."""

from pathlib import Path

import click

from .geometry import GeometryError, Point


def parse_point(ctx, param, value):
    """Click callback turning "x,y" strings into Points."""
    if value is None:
        return None
    if isinstance(value, tuple):
        return tuple(parse_point(ctx, param, v) for v in value)
    try:
        x, y = value.split(",")
        return Point(float(x), float(y))
    except ValueError:
        raise click.BadParameter(f"expected X,Y but got {value!r}") from None


def load_config(path: Path | None):
    from .config import Config

    return Config.load(path) if path else Config()


def write_output(turtle, fmt: str, output: Path, config, open_after: bool):
    from .gcode import GcodeExporter
    from .svg import HtmlExporter
    from .viewer import open_in_browser, save_document

    if fmt == "gcode":
        content = GcodeExporter(config).export(turtle)
    else:
        content = HtmlExporter(config).export(turtle)

    path = save_document(content, output)
    click.echo(f"Drawing saved to {path}")
    if open_after and not open_in_browser(path):
        click.echo(click.style("Could not open the file automatically", fg="yellow"))


@click.group()
def main():
    """turtlesoup - Turtle drawings rendered to HTML or gcode."""
    pass


@main.command()
@click.argument("shape", type=click.Choice(["square", "circle", "art"]))
@click.option("--size", "-s", default=100.0, type=float, help="Side length or radius")
@click.option("--sides", "-n", default=360, type=int, help="Polygon sides for circle")
@click.option("--format", "-f", "fmt", default="html", type=click.Choice(["html", "gcode"]))
@click.option("--output", "-o", type=Path)
@click.option("--open/--no-open", "open_after", default=False)
@click.option("--config", "-c", "config_path", type=Path)
def draw(shape: str, size: float, sides: int, fmt: str, output: Path | None, open_after: bool, config_path: Path | None):
    """Draw a shape and save the rendering."""
    from .shapes import SHAPES
    from .turtle import SimpleTurtle

    config = load_config(config_path)
    turtle = SimpleTurtle()
    try:
        SHAPES[shape](turtle, size, sides)
    except GeometryError as e:
        raise click.ClickException(str(e))

    output = output or Path("output.gcode" if fmt == "gcode" else "output.html")
    write_output(turtle, fmt, output, config, open_after)


@main.command()
@click.argument("points", nargs=-1, required=True, callback=parse_point)
@click.option("--draw", "do_draw", is_flag=True, help="Execute the plan and save it")
@click.option("--output", "-o", default=Path("output.html"), type=Path)
@click.option("--config", "-c", "config_path", type=Path)
def path(points: tuple, do_draw: bool, output: Path, config_path: Path | None):
    """Plan turn/forward instructions visiting POINTS (X,Y) in order."""
    from .shapes import PlanError, execute_plan, find_path
    from .turtle import SimpleTurtle

    turtle = SimpleTurtle()
    commands = find_path(turtle, points)
    for command in commands:
        click.echo(command)

    if do_draw:
        try:
            execute_plan(turtle, commands)
        except (GeometryError, PlanError) as e:
            raise click.ClickException(str(e))
        write_output(turtle, "html", output, load_config(config_path), False)


@main.command()
@click.argument("radius", type=float)
@click.argument("angle", type=float)
def chord(radius: float, angle: float):
    """Chord length for ANGLE degrees on a circle of RADIUS."""
    from .geometry import chord_length

    click.echo(f"{chord_length(radius, angle):.10f}")


@main.command()
@click.argument("p1", callback=parse_point)
@click.argument("p2", callback=parse_point)
def distance(p1: Point, p2: Point):
    """Distance between two X,Y points."""
    from .geometry import distance as dist

    click.echo(f"{dist(p1, p2)}")


if __name__ == "__main__":
    main()
