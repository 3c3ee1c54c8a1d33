"""Urban development feasibility calculator."""

from .models import (
    CalculationResult,
    DevelopmentParameters,
    default_parameters,
    validate_parameters,
)
from .calculations import (
    calculate,
    calculate_economics,
    format_summary_table,
    generate_projection,
)
from .scenarios import apply_what_if, run_what_if, run_sensitivity_grid

__all__ = [
    "CalculationResult",
    "DevelopmentParameters",
    "default_parameters",
    "validate_parameters",
    "calculate",
    "calculate_economics",
    "format_summary_table",
    "generate_projection",
    "apply_what_if",
    "run_what_if",
    "run_sensitivity_grid",
]
