"""Plain-text run reports."""

from __future__ import annotations

from config_io.schema import OptimizationResult


def _fmt_position(position: list[float]) -> str:
    return "[" + ", ".join(f"{x:.6g}" for x in position) + "]"


def format_report(result: OptimizationResult) -> str:
    """Render a finished run: totals, the best point, then each turtle's best."""
    lines = [
        f"{result.population_size} turtles performed {result.iterations} optimizer iterations for you.",
        f"The best score: {result.best_value:.6g} was observed at position: "
        f"{_fmt_position(result.best_position)}",
        "Below is a complete run down of the best locations: ",
    ]
    for number, turtle in enumerate(result.turtles):
        lines.append(
            f"\t Turtle #{number}'s best score {turtle.best_value:.6g}, "
            f"was observed at {_fmt_position(turtle.best_position)}"
        )
    return "\n".join(lines)
