from __future__ import annotations

import enum

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _enum_values(enum_cls) -> list:
    return [item.value for item in enum_cls]


class DrawStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class MemberStatus(str, enum.Enum):
    INVITED = "invited"
    JOINED = "joined"
    LEFT = "left"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    draw_status = Column(
        Enum(DrawStatus, name="draw_status", values_callable=_enum_values),
        nullable=False,
        default=DrawStatus.PENDING,
        server_default=DrawStatus.PENDING.value,
    )
    draw_date = Column(Date, nullable=True, index=True)
    previous_event_id = Column(Integer, ForeignKey("events.id", ondelete="SET NULL"), nullable=True)
    drawn_at = Column(DateTime(timezone=True), nullable=True)
    last_draw_seed = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name!r}, draw_status={self.draw_status})>"


class EventMember(Base):
    __tablename__ = "event_members"

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    participant_id = Column(String, nullable=False)
    status = Column(
        Enum(MemberStatus, name="member_status", values_callable=_enum_values),
        nullable=False,
        default=MemberStatus.JOINED,
        server_default=MemberStatus.JOINED.value,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("event_id", "participant_id", name="uq_event_members_event_participant"),
    )


class Exclusion(Base):
    __tablename__ = "exclusions"

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    giver_id = Column(String, nullable=False)
    blocked_id = Column(String, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    giver_id = Column(String, nullable=False)
    receiver_id = Column(String, nullable=False)
    first_reveal_pending = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("event_id", "giver_id", name="uq_assignments_event_giver"),
        UniqueConstraint("event_id", "receiver_id", name="uq_assignments_event_receiver"),
    )
