import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mapping_dashboard.api.employee_mappings import router as employee_mappings_router
from mapping_dashboard.api.employees import router as employees_router
from mapping_dashboard.api.health import router as health_router
from mapping_dashboard.api.incomplete_mappings import router as incomplete_mappings_router
from mapping_dashboard.api.mappings import router as mappings_router
from mapping_dashboard.api.org_chart import router as org_chart_router
from mapping_dashboard.api.reports import router as reports_router
from mapping_dashboard.api.root import router as root_router
from mapping_dashboard.api.uploads import router as uploads_router
from mapping_dashboard.core.config import settings
from mapping_dashboard.core.errors import register_exception_handlers
from mapping_dashboard.core.logging import configure_logging
from mapping_dashboard.db.base import Base
from mapping_dashboard.db.sample_data import load_sample_data
from mapping_dashboard.db.session import SessionLocal, engine
from mapping_dashboard.db.store import MappingStore

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_SAMPLE_DATA:
        Base.metadata.create_all(bind=engine)
        with SessionLocal() as db:
            if MappingStore(db).is_empty():
                load_sample_data(db)
                db.commit()
                logger.info("Loaded sample dataset into %s", engine.url.render_as_string(hide_password=True))
    yield


app = FastAPI(title="Report Mapping Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(reports_router)
app.include_router(org_chart_router)
app.include_router(employees_router)
app.include_router(mappings_router)
app.include_router(employee_mappings_router)
app.include_router(incomplete_mappings_router)
app.include_router(uploads_router)
