"""Field geometry and coordinate system.

The editor draws plays on a normalized canvas: the full field length
(both endzones included) maps to [0, 1] on the Y axis, with the endzone
the offense attacks at the top (Y = 0).
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# =============================================================================
# Field Dimensions (yards)
# =============================================================================

DEFAULT_FIELD_LENGTH = 50.0     # Goal line to goal line (5v5)
DEFAULT_FIELD_WIDTH = 25.0
DEFAULT_ENDZONE_SIZE = 7.0
DEFAULT_LINE_OF_SCRIMMAGE = 5.0  # Yards from the offense's own goal line

# Editor limits
MIN_FIELD_LENGTH, MAX_FIELD_LENGTH = 50.0, 100.0
MIN_FIELD_WIDTH, MAX_FIELD_WIDTH = 25.0, 50.0
MIN_ENDZONE_SIZE, MAX_ENDZONE_SIZE = 5.0, 10.0

# Scoring band: carrier Y below this many (normalized) yards is a touchdown
TOUCHDOWN_DEPTH_YARDS = 7.0

# Sidelines (normalized X)
LEFT_SIDELINE = 0.02
RIGHT_SIDELINE = 0.98


@dataclass
class FieldSettings:
    """Field dimensions as configured in the editor (yards)."""
    field_length: float = DEFAULT_FIELD_LENGTH
    field_width: float = DEFAULT_FIELD_WIDTH
    endzone_size: float = DEFAULT_ENDZONE_SIZE
    line_of_scrimmage: float = DEFAULT_LINE_OF_SCRIMMAGE

    def clamped(self) -> FieldSettings:
        """Clamp dimensions to the ranges the editor allows.

        The line of scrimmage is kept out of the endzone (1 to length - 1).
        """
        length = max(MIN_FIELD_LENGTH, min(MAX_FIELD_LENGTH, self.field_length))
        width = max(MIN_FIELD_WIDTH, min(MAX_FIELD_WIDTH, self.field_width))
        endzone = max(MIN_ENDZONE_SIZE, min(MAX_ENDZONE_SIZE, self.endzone_size))
        los_max = max(1.0, length - 1)
        los = max(1.0, min(los_max, self.line_of_scrimmage))
        return FieldSettings(
            field_length=length,
            field_width=width,
            endzone_size=endzone,
            line_of_scrimmage=los,
        )

    def to_dict(self) -> dict:
        return {
            "field_length": self.field_length,
            "field_width": self.field_width,
            "endzone_size": self.endzone_size,
            "line_of_scrimmage": self.line_of_scrimmage,
        }


@dataclass(frozen=True)
class FieldGeometry:
    """Geometry derived once per play from FieldSettings.

    Attributes:
        total_length_yards: Field length plus both endzones
        yards_to_norm: Normalized units per yard
        los_y: Line of scrimmage as normalized Y
    """
    total_length_yards: float
    yards_to_norm: float
    los_y: float

    @classmethod
    def from_settings(cls, settings: FieldSettings) -> FieldGeometry:
        total = settings.field_length + settings.endzone_size * 2
        yards_to_norm = 1 / total
        los_y = (
            settings.endzone_size + settings.field_length - settings.line_of_scrimmage
        ) * yards_to_norm
        return cls(total_length_yards=total, yards_to_norm=yards_to_norm, los_y=los_y)

    def to_yards(self, normalized: float) -> float:
        """Convert a normalized distance to yards."""
        return normalized * self.total_length_yards

    def to_normalized(self, yards: float) -> float:
        """Convert yards to a normalized distance."""
        return yards * self.yards_to_norm

    def yards_gained(self, y: float) -> int:
        """Signed yards from the line of scrimmage to a normalized Y.

        Upfield is decreasing Y, so positions above the LOS are gains.
        """
        # Halves round toward +inf, so 2.5 yards reports 3 and -2.5 reports -2
        return math.floor((self.los_y - y) * self.total_length_yards + 0.5)

    @property
    def touchdown_y(self) -> float:
        """Normalized Y below which a carrier has scored."""
        return self.yards_to_norm * TOUCHDOWN_DEPTH_YARDS

    def is_out_of_bounds(self, x: float) -> bool:
        return x < LEFT_SIDELINE or x > RIGHT_SIDELINE
