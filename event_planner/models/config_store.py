from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from event_planner.core.database import Base


class ConfigEntry(Base):
    """
    Named configuration objects, e.g. "event_planner.settings".
    data holds the whole object as JSON.
    """
    __tablename__ = "event_planner_config"

    name: Mapped[str]  = mapped_column(String(128), primary_key=True)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<ConfigEntry name={self.name!r}>"
