"""Engine module for concept plan checks.

This module reports the geometric problems the renderer tolerates, such as
sealed rooms, overlaps and rooms unreachable through doors.
"""

from .validators import PlanWarning, validate_plan

__all__ = ["PlanWarning", "validate_plan"]
