"""Filter and summarize job applications. No UI logic; used by app layer."""

from typing import Dict, List

from job_tracker_ai.config import APPLICATION_STATUSES
from job_tracker_ai.schemas.application import JobApplication

ALL_STATUSES_KEY = "ALL"


def filter_by_status(
    applications: List[JobApplication],
    status: str,
) -> List[JobApplication]:
    """
    Filter applications by status. Does not mutate the input list.
    If status is "ALL" (or empty), return all applications.
    """
    if not status or status == ALL_STATUSES_KEY:
        return list(applications)
    return [a for a in applications if a.status == status]


def search_applications(
    applications: List[JobApplication],
    term: str,
) -> List[JobApplication]:
    """Case-insensitive match of term against company, position and location."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(applications)
    return [
        a for a in applications
        if needle in a.company.lower()
        or needle in a.position.lower()
        or (a.location and needle in a.location.lower())
    ]


def summarize_applications(applications: List[JobApplication]) -> Dict[str, float]:
    """
    Dashboard numbers: total, one count per status key, and success_rate
    (accepted share of all applications, percent rounded to one decimal).
    """
    summary: Dict[str, float] = {"total": len(applications)}
    for status in APPLICATION_STATUSES:
        summary[status] = sum(1 for a in applications if a.status == status)
    total = summary["total"]
    summary["success_rate"] = round(summary["ACCEPTED"] / total * 100, 1) if total else 0.0
    return summary
