"""Timesheet Engine package.

Organized by feature modules (breaks, payroll, validation, timesheets) with a
thin Flask controller layer on top of pure calculation services.
"""

from .breaks.evaluator import break_minutes, is_deductible
from .payroll.service import classify_day, compute_week
from .validation.break_validator import validate_day

__all__ = [
    "break_minutes",
    "classify_day",
    "compute_week",
    "is_deductible",
    "validate_day",
]
