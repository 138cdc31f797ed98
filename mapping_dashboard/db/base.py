from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Import models so Alembic and create_all can discover them
from mapping_dashboard.models import *  # noqa
