from __future__ import annotations

import datetime
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from loguru import logger

from giftdraw.db import DrawStatus, Event, get_session, repo
from giftdraw.services.constraints import DrawFailure, Exclusion
from giftdraw.services.draw import DrawResult, run_draw
from giftdraw.services.shuffle_matcher import DEFAULT_MAX_ATTEMPTS

REPORT_COMPLETED = "completed"
REPORT_SKIPPED = "skipped"
REPORT_FAILED = "failed"
REPORT_ERROR = "error"

FAILURE_MESSAGES: Dict[DrawFailure, str] = {
    DrawFailure.INSUFFICIENT_PARTICIPANTS: "At least two participants are needed for the draw.",
    DrawFailure.DUPLICATE_MEMBERS: "The participant list contains duplicates. Check the event members.",
    DrawFailure.INFEASIBLE: (
        "The draw cannot satisfy the current exclusions. Remove some of them and try again."
    ),
}


class DrawError(RuntimeError):
    pass


@dataclass(frozen=True)
class EventDrawResult:
    event: Event
    result: DrawResult
    seed: int


@dataclass(frozen=True)
class ScheduledDrawReport:
    event_id: int
    status: str
    assigned_count: int = 0
    reason: Optional[str] = None


def describe_failure(reason: DrawFailure) -> str:
    return FAILURE_MESSAGES[reason]


def load_members(session, event: Event) -> List[str]:
    return repo.list_joined_participant_ids(session, event.id)


def load_exclusions(session, event: Event) -> Set[Exclusion]:
    return {Exclusion(giver, blocked) for giver, blocked in repo.list_active_exclusion_pairs(session, event.id)}


def load_anti_recurrence(session, event: Event) -> Dict[str, str]:
    if event.previous_event_id is None:
        return {}
    previous = repo.list_assignments(session, event.previous_event_id)
    return {item.giver_id: item.receiver_id for item in previous}


def draw_event(
    session,
    event: Optional[Event],
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> EventDrawResult:
    if event is None:
        raise DrawError("Event not found.")

    members = load_members(session, event)
    exclusions = load_exclusions(session, event)
    anti_recurrence = load_anti_recurrence(session, event)

    if seed is None:
        seed = random.randint(1, 2**31 - 1)

    result = run_draw(
        members,
        exclusions=exclusions,
        anti_recurrence=anti_recurrence,
        seed=seed,
        max_attempts=max_attempts,
    )
    log = logger.bind(event_id=event.id, seed=seed, members=len(members))

    if not result.ok:
        log.warning("Draw failed: {reason}", reason=result.failure.value)
        return EventDrawResult(event=event, result=result, seed=seed)

    repo.replace_assignments(session, event.id, result.assignments)
    repo.update_event_draw_status(
        session,
        event,
        DrawStatus.COMPLETED,
        drawn_at=datetime.datetime.now(datetime.timezone.utc),
        seed=seed,
    )
    log.bind(strategy=result.strategy).info("Assignments generated")
    return EventDrawResult(event=event, result=result, seed=seed)


def reset_event(session, event: Event) -> int:
    removed = repo.clear_assignments(session, event.id)
    repo.update_event_draw_status(session, event, DrawStatus.PENDING)
    logger.bind(event_id=event.id, removed=removed).info("Draw reset")
    return removed


def _draw_scheduled_event(event_id: int, max_attempts: int) -> ScheduledDrawReport:
    with get_session() as session:
        event = repo.get_event_for_update(session, event_id)
        if event is None or event.draw_status != DrawStatus.PENDING:
            return ScheduledDrawReport(
                event_id=event_id,
                status=REPORT_SKIPPED,
                reason="Event is no longer pending.",
            )
        if repo.count_joined_members(session, event_id) < 2:
            return ScheduledDrawReport(
                event_id=event_id,
                status=REPORT_SKIPPED,
                reason=describe_failure(DrawFailure.INSUFFICIENT_PARTICIPANTS),
            )

        outcome = draw_event(session, event, max_attempts=max_attempts)
        if not outcome.result.ok:
            return ScheduledDrawReport(
                event_id=event_id,
                status=REPORT_FAILED,
                reason=describe_failure(outcome.result.failure),
            )
        return ScheduledDrawReport(
            event_id=event_id,
            status=REPORT_COMPLETED,
            assigned_count=len(outcome.result.assignments),
        )


def run_scheduled_draws(
    today: datetime.date,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[ScheduledDrawReport]:
    with get_session() as session:
        event_ids = repo.list_event_ids_due_for_draw(session, today)

    reports: List[ScheduledDrawReport] = []
    for event_id in event_ids:
        try:
            reports.append(_draw_scheduled_event(event_id, max_attempts))
        except Exception as exc:
            logger.bind(event_id=event_id).exception("Scheduled draw error: {error}", error=str(exc))
            reports.append(ScheduledDrawReport(event_id=event_id, status=REPORT_ERROR, reason=str(exc)))

    logger.bind(day=today.isoformat(), processed=len(reports)).info("Scheduled draws processed")
    return reports
