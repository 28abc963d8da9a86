"""Tests for the runner, metrics and text report."""

from __future__ import annotations

import csv
import logging
import math

import pytest

from config_io.config import load_config
from config_io.schema import OptimizationResult, SwarmStatus, TurtleSummary
from config_io.utils import load_json
from eval.metrics import compute_metrics
from eval.report import format_report
from eval.runner import run_evaluation, run_optimization


def _quick_config(**swarm):
    """A config whose goal is met on the very first evaluation."""
    overrides = {
        "swarm": {"dimensions": 2, "lower": -0.5, "upper": 0.5, "population_size": 4, **swarm},
        "run": {"objective": "sphere", "goal": 1.0},
    }
    return load_config(overrides=overrides)


def _result() -> OptimizationResult:
    return OptimizationResult(
        status=SwarmStatus.CONVERGED,
        iterations=5,
        population_size=3,
        dimensions=1,
        velocity_constant=0.5,
        best_position=[0.0],
        best_value=0.0,
        turtles=[
            TurtleSummary(best_position=[0.0], best_value=0.0),
            TurtleSummary(best_position=[3.0], best_value=9.0),
            TurtleSummary(best_position=[-1.0], best_value=1.0),
        ],
    )


def test_run_optimization_converges():
    """The runner stops once the configured goal is met."""
    result = run_optimization(_quick_config())
    assert result.status == SwarmStatus.CONVERGED
    assert result.iterations == 1
    assert result.best_value <= 1.0
    assert len(result.turtles) == 4


def test_run_optimization_custom_objective():
    """A callable objective replaces the named one."""
    result = run_optimization(_quick_config(), objective=lambda x: -1.0)
    assert result.best_value == -1.0


def test_custom_objective_name_is_logged(caplog):
    """The start log names the callable actually being minimised."""
    def flat(x):
        return 0.0

    with caplog.at_level(logging.INFO, logger="eval.runner"):
        run_optimization(_quick_config(), objective=flat)
    start = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Running swarm")]
    assert start and "objective=flat" in start[0]


def test_result_json_roundtrip(tmp_path):
    """A saved result loads back into an equal model."""
    path = tmp_path / "out" / "result.json"
    result = run_optimization(_quick_config(), result_path=str(path))
    assert path.exists()
    restored = OptimizationResult(**load_json(path))
    assert restored == result


def test_velocity_override_warns(caplog):
    """Overriding the velocity constant is logged as a warning."""
    with caplog.at_level(logging.WARNING, logger="eval.runner"):
        run_optimization(_quick_config(velocity_constant=1e-3))
    assert any("velocity_constant overridden" in r.getMessage() for r in caplog.records)


def test_default_velocity_does_not_warn(caplog):
    """The default velocity constant runs quietly."""
    with caplog.at_level(logging.WARNING, logger="eval.runner"):
        run_optimization(_quick_config())
    assert not any(r.levelno >= logging.WARNING for r in caplog.records)


def test_run_evaluation_writes_outputs(tmp_path):
    """Batch runs write per-seed JSON, a CSV and a summary."""
    summary = run_evaluation(_quick_config(), [0, 1, 2], output_dir=str(tmp_path))
    assert summary["num_seeds"] == 3
    assert summary["avg_iterations"] == 1.0
    assert summary["best_value"] <= 1.0
    for seed in (0, 1, 2):
        assert (tmp_path / f"eval_seed{seed}.json").exists()

    with open(tmp_path / "evaluation_metrics.csv") as f:
        rows = list(csv.DictReader(f))
    assert [int(r["seed"]) for r in rows] == [0, 1, 2]
    assert load_json(tmp_path / "evaluation_summary.json")["num_seeds"] == 3


def test_run_evaluation_leaves_config_untouched(tmp_path):
    """Seeding each run does not modify the caller's config."""
    config = _quick_config(seed=99)
    run_evaluation(config, [3], output_dir=str(tmp_path))
    assert config.swarm.seed == 99


def test_compute_metrics():
    """Evaluations, personal-best mean and spread from a known result."""
    m = compute_metrics(_result())
    assert m["status"] == "CONVERGED"
    assert m["evaluations"] == 15
    assert m["best_value"] == 0.0
    assert m["mean_personal_best"] == pytest.approx(10.0 / 3)
    assert m["mean_spread"] == pytest.approx(4.0 / 3)
    assert m["max_spread"] == 3.0


def test_compute_metrics_accepts_dict():
    """A plain dict is accepted as a result."""
    assert compute_metrics(_result().model_dump())["iterations"] == 5


def test_compute_metrics_unevaluated_turtles():
    """Turtles never evaluated give an infinite mean."""
    result = _result().model_copy(update={
        "turtles": [TurtleSummary(best_position=[0.0], best_value=math.inf)],
    })
    assert compute_metrics(result)["mean_personal_best"] == math.inf


def test_format_report():
    """The text report lists totals, the best point and every turtle."""
    text = format_report(_result())
    lines = text.splitlines()
    assert lines[0] == "3 turtles performed 5 optimizer iterations for you."
    assert "The best score: 0 was observed at position: [0]" in lines[1]
    assert "Turtle #1's best score 9, was observed at [3]" in text
    assert len(lines) == 3 + 3
