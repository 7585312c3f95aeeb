from sqlalchemy import BigInteger, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from event_planner.core.database import Base


class Event(Base):
    """
    An event accepting registrations between registration_start and
    registration_end. All temporal columns hold Unix epoch seconds;
    event_date is midnight (site time) of the event day.
    """
    __tablename__ = "event_planner_events"

    id:                 Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_name:         Mapped[str] = mapped_column(String(255), nullable=False)
    category:           Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    registration_start: Mapped[int] = mapped_column(BigInteger, nullable=False)
    registration_end:   Mapped[int] = mapped_column(BigInteger, nullable=False)
    event_date:         Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    created:            Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index("ix_event_planner_events_window", "registration_start", "registration_end"),
    )

    def __repr__(self) -> str:
        return f"<Event id={self.id} name={self.event_name!r} category={self.category}>"


class Registration(Base):
    """
    A signup for an event. category, event_date and event_name are copied
    from the event at creation time and never re-joined.
    """
    __tablename__ = "event_planner_registrations"

    id:           Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id:     Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    full_name:    Mapped[str] = mapped_column(String(255), nullable=False)
    email:        Mapped[str] = mapped_column(String(255), nullable=False)
    college_name: Mapped[str] = mapped_column(String(255), nullable=False)
    department:   Mapped[str] = mapped_column(String(255), nullable=False)
    category:     Mapped[str] = mapped_column(String(64), nullable=False)
    event_date:   Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    event_name:   Mapped[str] = mapped_column(String(255), nullable=False)
    created:      Mapped[int] = mapped_column(BigInteger, nullable=False)

    # email is stored lower-cased, so this covers case-insensitive duplicates
    __table_args__ = (
        UniqueConstraint("event_date", "email", name="uq_registration_event_date_email"),
    )

    def __repr__(self) -> str:
        return f"<Registration id={self.id} event_id={self.event_id} email={self.email!r}>"
