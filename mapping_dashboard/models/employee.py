from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mapping_dashboard.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    # store iteration order
    seq: Mapped[int] = mapped_column(Integer, nullable=False, index=True, default=0)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")

    team_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    team_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    area_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    city_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    city_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    country_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    country_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    location: Mapped[str] = mapped_column(String(300), nullable=False, default="")

    supervisor_id: Mapped[str | None] = mapped_column(
        String(50), ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Contact details come from the HR roster; absent values stay null
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    join_date: Mapped[date | None] = mapped_column(Date, nullable=True)
