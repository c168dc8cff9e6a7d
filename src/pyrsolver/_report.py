"""Text report for solved pyramids."""

from __future__ import annotations

from ._solver import PyramidResult

LABEL_WIDTH = 15


def _line(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}} {value}"


def _number(value: float, precision: int) -> str:
    # Rounding residue such as -1e-16 would otherwise print as -0.000000
    return format(round(value, precision) + 0.0, f".{precision}f")


def format_report(result: PyramidResult, precision: int = 6) -> str:
    """
    Format a solved pyramid as labeled lines.

    Args:
        result: Solver output
        precision: Decimal places for real values

    Returns:
        Multi-line report
    """
    lines = [_line("Base Shape", result.shape_name)]
    if result.triangle_class is not None:
        lines.append(_line("Triangle Type", result.triangle_class.value))
    lines += [
        _line("Perimeter", _number(result.perimeter, precision)),
        _line("Base Area", _number(result.base_area, precision)),
        "",
        _line("Volume", _number(result.volume, precision)),
        _line("Surface Area", _number(result.surface_area, precision)),
        _line("Slant Height", _number(result.slant_height, precision)),
        "",
        _line("Height", _number(result.height, precision)),
        _line(
            "Centroid",
            f"({_number(result.centroid.x, precision)}, {_number(result.centroid.y, precision)})",
        ),
    ]
    return "\n".join(lines)
