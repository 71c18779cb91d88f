from giftdraw.db.models import (
    Assignment,
    Base,
    DrawStatus,
    Event,
    EventMember,
    Exclusion,
    MemberStatus,
)
from giftdraw.db.session import SessionLocal, get_session, init_engine

__all__ = [
    "Assignment",
    "Base",
    "DrawStatus",
    "Event",
    "EventMember",
    "Exclusion",
    "MemberStatus",
    "SessionLocal",
    "get_session",
    "init_engine",
]
