"""Structured logging for itinerary edits and day refinements."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredPlanningLogger:
    """Structured logger for planning engine operations."""

    def log_edit(
        self,
        operation: str,
        day_id: str | int,
        outcome: str,
        activity_id: str | None = None,
        activity_count: int | None = None,
    ) -> None:
        """Log an activity operation on one day."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "day_id": day_id,
            "outcome": outcome,
        }

        if activity_id is not None:
            log_data["activity_id"] = activity_id
        if activity_count is not None:
            log_data["activity_count"] = activity_count

        log_msg = f"Itinerary edit: {operation} - {outcome}"

        if outcome == "applied":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.debug(log_msg, extra={"structured": log_data})

    def log_refinement(
        self,
        refinement: str,
        day_id: str,
        before_count: int,
        after_count: int,
        added: list[str] | None = None,
        removed: list[str] | None = None,
    ) -> None:
        """Log the result of refining a single day."""
        log_data: dict[str, Any] = {
            "refinement": refinement,
            "day_id": day_id,
            "before_count": before_count,
            "after_count": after_count,
            "added": added or [],
            "removed": removed or [],
        }

        changed = bool(added or removed)
        log_msg = f"Day refinement: {refinement} - {'changed' if changed else 'unchanged'}"

        if changed:
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.debug(log_msg, extra={"structured": log_data})


planning_logger = StructuredPlanningLogger()
