"""CLI tests using click's runner."""

import pytest
from click.testing import CliRunner

from turtlesoup import viewer
from turtlesoup.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_draw_square_html(runner, tmp_path):
    out = tmp_path / "square.html"
    result = runner.invoke(main, ["draw", "square", "--size", "50", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert f"Drawing saved to {out}" in result.output
    assert out.read_text().count("<line") == 4


def test_draw_circle_gcode(runner, tmp_path):
    out = tmp_path / "circle.gcode"
    result = runner.invoke(
        main, ["draw", "circle", "-s", "20", "-n", "12", "-f", "gcode", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    text = out.read_text()
    assert text.count("G1 ") == 12
    assert text.endswith("M84 ; release motors")


def test_draw_art_default_output(runner):
    with runner.isolated_filesystem():
        result = runner.invoke(main, ["draw", "art"])
        assert result.exit_code == 0, result.output
        with open("output.html") as f:
            assert f.read().count("<line") == 54


def test_draw_rejects_zero_sides(runner, tmp_path):
    result = runner.invoke(main, ["draw", "circle", "-n", "0", "-o", str(tmp_path / "x.html")])
    assert result.exit_code != 0
    assert "num_sides" in result.output


def test_draw_rejects_negative_size(runner, tmp_path):
    result = runner.invoke(main, ["draw", "square", "--size=-5", "-o", str(tmp_path / "x.html")])
    assert result.exit_code != 0
    assert "forward length" in result.output


def test_draw_with_config(runner, tmp_path):
    config = tmp_path / "cfg.json"
    config.write_text('{"canvas": {"width": 123, "title": "Configured"}}')
    out = tmp_path / "o.html"
    result = runner.invoke(main, ["draw", "square", "-c", str(config), "-o", str(out)])
    assert result.exit_code == 0, result.output
    html = out.read_text()
    assert 'width="123"' in html
    assert "<title>Configured</title>" in html


def test_draw_open_failure_is_reported(runner, tmp_path, monkeypatch):
    monkeypatch.setattr(viewer, "open_in_browser", lambda path: False)
    result = runner.invoke(main, ["draw", "square", "--open", "-o", str(tmp_path / "s.html")])
    assert result.exit_code == 0
    assert "Could not open the file automatically" in result.output


def test_path_prints_plan(runner):
    result = runner.invoke(main, ["path", "20,20", "80,20", "80,80"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "turn 45.00",
        "forward 28.28",
        "turn 315.00",
        "forward 60.00",
        "turn 90.00",
        "forward 60.00",
    ]


def test_path_draw_saves_rendering(runner, tmp_path):
    out = tmp_path / "path.html"
    result = runner.invoke(main, ["path", "0,10", "10,10", "--draw", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().count("<line") == 2


def test_path_bad_point(runner):
    result = runner.invoke(main, ["path", "1;2"])
    assert result.exit_code == 2
    assert "expected X,Y" in result.output


def test_chord(runner):
    result = runner.invoke(main, ["chord", "5", "60"])
    assert result.exit_code == 0
    assert result.output.strip() == "5.0000000000"


def test_distance(runner):
    result = runner.invoke(main, ["distance", "0,0", "3,4"])
    assert result.exit_code == 0
    assert result.output.strip() == "5.0"
