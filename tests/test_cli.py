"""Tests for the plane-geom command line."""

import logging
import pytest
from click.testing import CliRunner

from plane_geom import cli, log


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from installing handlers on the test process's root logger."""
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


def test_distance(runner):
    """Distance between two points."""
    result = runner.invoke(cli.main, ["distance", "0,0", "3,4"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_negative_coordinates(runner):
    """Negative coordinates go after --."""
    result = runner.invoke(cli.main, ["distance", "--", "-3,0", "0,4"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_segment(runner):
    """Segment distance clamps to the nearer endpoint."""
    result = runner.invoke(cli.main, ["segment", "13,4", "0,0", "10,0"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_line(runner):
    """Distance to a horizontal line."""
    result = runner.invoke(cli.main, ["line", "0,5", "0,0", "10,0"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_angle(runner):
    """--direction reflects left-pointing rays."""
    result = runner.invoke(cli.main, ["angle", "0,0", "-10,10", "--direction"])
    assert result.exit_code == 0
    assert result.output.strip() == "135"


def test_circle(runner):
    """Circle offsets ignore the centre."""
    result = runner.invoke(cli.main, ["circle", "100,100", "0", "10", "--start", "top"])
    assert result.exit_code == 0
    x, y = result.output.split()
    assert float(x) == pytest.approx(0, abs=0.01)
    assert float(y) == pytest.approx(10)


def test_region(runner):
    """Region test prints true or false."""
    inside = runner.invoke(cli.main, ["region", "5,5", "0,0", "--type", "square"])
    outside = runner.invoke(cli.main, ["region", "5,5", "0,0"])
    assert inside.output.strip() == "true"
    assert outside.output.strip() == "false"


def test_region_rejects_unknown_type(runner):
    """Unknown region types are a usage error."""
    result = runner.invoke(cli.main, ["region", "0,0", "0,0", "--type", "hex"])
    assert result.exit_code == 2


def test_nearest(runner):
    """Nearest prints index and coordinates."""
    result = runner.invoke(cli.main, ["nearest", "0,0", "10,10", "1,2", "5,5"])
    assert result.exit_code == 0
    assert result.output.strip() == "1 1 2"


def test_nearest_without_candidates(runner):
    """No candidates is reported as an error."""
    result = runner.invoke(cli.main, ["nearest", "0,0"])
    assert result.exit_code == 1
    assert "at least one" in result.output


def test_node(runner):
    """Node lookup prints the last matching node."""
    result = runner.invoke(cli.main, ["node", "0,0", "1,0", "50,50", "0,1"])
    assert result.exit_code == 0
    assert result.output.strip() == "2 0 1"


def test_node_miss(runner):
    """A miss prints the sentinel."""
    result = runner.invoke(cli.main, ["node", "0,0", "50,50", "--radius", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "-1 0 0"


@pytest.mark.parametrize("bad", ["1", "1,2,3", "a,b"])
def test_bad_point(runner, bad):
    """Malformed points are a usage error."""
    result = runner.invoke(cli.main, ["distance", bad, "0,0"])
    assert result.exit_code == 2


def test_large_coordinates_print_in_full(runner):
    """Results are printed without losing digits."""
    result = runner.invoke(cli.main, ["distance", "0,0", "1234567,0"])
    assert result.exit_code == 0
    assert result.output.strip() == "1234567"


def test_nearest_echoes_exact_coordinates(runner):
    """Matched coordinates round-trip through the output."""
    result = runner.invoke(cli.main, ["nearest", "0,0", "0.1234567891,9876543.21"])
    assert result.exit_code == 0
    assert result.output.split() == ["0", "0.1234567891", "9876543.21"]


def test_verbose_enables_debug_logging(runner, clean_root, monkeypatch):
    """-v installs a console handler at DEBUG level."""
    monkeypatch.setattr(cli, "setup_logging", log.setup_logging)
    before = len(clean_root.handlers)
    result = runner.invoke(cli.main, ["-v", "distance", "0,0", "3,4"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"
    assert clean_root.level == logging.DEBUG
    assert len(clean_root.handlers) == before + 1
