"""Planning warning models - advisory signals about trip feasibility."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class WarningSeverity(str, Enum):
    """Severity levels for planning warnings."""

    INFO = "info"
    CAUTION = "caution"
    WARNING = "warning"


class WarningType(str, Enum):
    """Categories of planning warnings."""

    PACING = "pacing"
    HOLIDAY = "holiday"
    SEASONAL_RAINY = "seasonal_rainy"
    SEASONAL_CHERRY_BLOSSOM = "seasonal_cherry_blossom"
    SEASONAL_AUTUMN = "seasonal_autumn"
    WEATHER = "weather"
    DISTANCE = "distance"


class PlanningWarning(BaseModel):
    """A non-blocking advisory about the trip being planned.

    Warnings are derived on demand and never persisted; consumers should only
    rely on grouping by type, not on list order.
    """

    model_config = ConfigDict(frozen=True)

    id: str  # Stable machine id, e.g., "holiday-golden-week"
    type: WarningType
    severity: WarningSeverity
    title: str
    message: str


class WarningsSummary(BaseModel):
    """Counts of warnings per severity."""

    model_config = ConfigDict(frozen=True)

    total: int
    cautions: int
    warnings: int
    info: int
