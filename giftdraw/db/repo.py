from __future__ import annotations

import datetime
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import and_, delete, func, select

from giftdraw.db.models import (
    Assignment,
    DrawStatus,
    Event,
    EventMember,
    Exclusion,
    MemberStatus,
)


def get_event_by_id(session, event_id: int) -> Optional[Event]:
    return session.scalar(select(Event).where(Event.id == event_id))


def get_event_for_update(session, event_id: int) -> Optional[Event]:
    return session.scalar(select(Event).where(Event.id == event_id).with_for_update())


def create_event(
    session,
    name: str,
    draw_date: Optional[datetime.date] = None,
    previous_event_id: Optional[int] = None,
) -> Event:
    event = Event(name=name, draw_date=draw_date, previous_event_id=previous_event_id)
    session.add(event)
    session.flush()
    return event


def add_member(
    session,
    event_id: int,
    participant_id: str,
    status: MemberStatus = MemberStatus.JOINED,
) -> EventMember:
    member = EventMember(event_id=event_id, participant_id=participant_id, status=status)
    session.add(member)
    session.flush()
    return member


def list_joined_participant_ids(session, event_id: int) -> List[str]:
    return list(
        session.scalars(
            select(EventMember.participant_id)
            .where(and_(EventMember.event_id == event_id, EventMember.status == MemberStatus.JOINED))
            .order_by(EventMember.id)
        ).all()
    )


def count_joined_members(session, event_id: int) -> int:
    return session.scalar(
        select(func.count())
        .select_from(EventMember)
        .where(and_(EventMember.event_id == event_id, EventMember.status == MemberStatus.JOINED))
    )


def add_exclusion(session, event_id: int, giver_id: str, blocked_id: str, active: bool = True) -> Exclusion:
    exclusion = Exclusion(event_id=event_id, giver_id=giver_id, blocked_id=blocked_id, active=active)
    session.add(exclusion)
    session.flush()
    return exclusion


def list_active_exclusion_pairs(session, event_id: int) -> List[Tuple[str, str]]:
    rows = session.execute(
        select(Exclusion.giver_id, Exclusion.blocked_id).where(
            and_(Exclusion.event_id == event_id, Exclusion.active.is_(True))
        )
    ).all()
    return [(giver_id, blocked_id) for giver_id, blocked_id in rows]


def list_assignments(session, event_id: int) -> List[Assignment]:
    return list(
        session.scalars(
            select(Assignment).where(Assignment.event_id == event_id).order_by(Assignment.id)
        ).all()
    )


def clear_assignments(session, event_id: int) -> int:
    result = session.execute(delete(Assignment).where(Assignment.event_id == event_id))
    return result.rowcount or 0


def replace_assignments(session, event_id: int, pairs: Iterable[Tuple[str, str]]) -> int:
    clear_assignments(session, event_id)
    rows = [
        Assignment(event_id=event_id, giver_id=giver_id, receiver_id=receiver_id, first_reveal_pending=True)
        for giver_id, receiver_id in pairs
    ]
    session.add_all(rows)
    session.flush()
    return len(rows)


def update_event_draw_status(
    session,
    event: Event,
    status: DrawStatus,
    drawn_at: Optional[datetime.datetime] = None,
    seed: Optional[int] = None,
) -> None:
    event.draw_status = status
    event.drawn_at = drawn_at
    event.last_draw_seed = seed


def list_event_ids_due_for_draw(session, day: datetime.date) -> List[int]:
    return list(
        session.scalars(
            select(Event.id)
            .where(and_(Event.draw_date == day, Event.draw_status == DrawStatus.PENDING))
            .order_by(Event.id)
        ).all()
    )
