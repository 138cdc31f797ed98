from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mapping_dashboard.db.base import Base


class Report(Base):
    __tablename__ = "reports"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True, default=0)

    # Mapping records reference reports by name, so it must stay unique
    name: Mapped[str] = mapped_column(String(200), unique=True, index=True, nullable=False)
    region: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    # Ordered employee ids rooting the report's org chart
    supervisors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
