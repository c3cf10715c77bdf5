"""Render the decorative figure to an HTML page."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turtlesoup.shapes import draw_personal_art
from turtlesoup.svg import HtmlExporter
from turtlesoup.turtle import SimpleTurtle
from turtlesoup.viewer import open_in_browser, save_document


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-o", "--output", type=Path, default=Path("output.html"))
    parser.add_argument("--open", action="store_true", help="Open the result when done")
    args = parser.parse_args()

    turtle = SimpleTurtle()
    draw_personal_art(turtle)

    path = save_document(HtmlExporter().export(turtle), args.output)
    print(f"Drawing saved to {path} ({len(turtle.get_segments())} segments)")

    if args.open and not open_in_browser(path):
        print("Could not open the file automatically")


if __name__ == "__main__":
    main()
