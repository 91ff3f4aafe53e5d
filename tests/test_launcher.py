import csv
import json

import pytest

from physviz.core.logging_utils import RunLogger
from physviz.data.scenarios import SCENARIOS
from physviz.launcher import main, simulate


def test_simulate_circular_orbit():
    summary = simulate(SCENARIOS["circular2d"], 2_000)
    assert summary["steps"] == 2_000
    assert summary["time"] == pytest.approx(20.0)
    assert summary["trail_points"] == 1000
    assert not summary["collided"]
    assert summary["distance"] == pytest.approx(150.0, rel=0.01)
    assert abs(summary["energy_drift"]) < 0.01


def test_simulate_command_writes_run(tmp_path, capsys):
    code = main(
        [
            "simulate",
            "--scenario",
            "gravity3d",
            "--steps",
            "100",
            "--log-dir",
            str(tmp_path),
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Scenario: gravity3d" in out
    assert "Steps run: 100" in out

    run_dirs = [p for p in tmp_path.iterdir() if p.is_dir()]
    assert len(run_dirs) == 1
    meta = json.loads((run_dirs[0] / "meta.json").read_text(encoding="utf-8"))
    assert meta["scenario"] == "gravity3d"
    assert meta["dims"] == 3
    assert meta["log_every_steps"] == 20
    header = (run_dirs[0] / "timeseries.csv").read_text(encoding="utf-8").splitlines()[0]
    assert header.split(",")[2:5] == ["x", "y", "z"]

    with (run_dirs[0] / "timeseries.csv").open(newline="") as fh:
        steps = [int(row["step"]) for row in csv.DictReader(fh)]
    assert steps == [20, 40, 60, 80, 100]


def test_view_rejects_wrong_dimensionality():
    with pytest.raises(SystemExit):
        main(["gravity", "--scenario", "gravity3d"])
    with pytest.raises(SystemExit):
        main(["gravity3d", "--scenario", "circular2d"])


def test_unknown_scenario_and_bad_steps():
    with pytest.raises(SystemExit):
        main(["simulate", "--scenario", "binary"])
    with pytest.raises(SystemExit):
        main(["simulate", "--steps", "-1"])


def test_simulate_closes_with_partial_snapshot(tmp_path):
    with RunLogger(tmp_path, run_id="partial", dims=2) as logger:
        simulate(SCENARIOS["circular2d"], 50, logger)

    with logger.timeseries_path.open(newline="") as fh:
        steps = [int(row["step"]) for row in csv.DictReader(fh)]
    assert steps == [20, 40, 50]
