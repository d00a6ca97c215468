from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import default_config
from logging_config import configure_logging
from routes.health import router as health_router
from routes.maintenance import router as maintenance_router

configure_logging(default_config.logging.level)

app = FastAPI(
    title="Reference Index Maintenance API",
    description="Finds and removes reference index entries pointing to missing files",
    version="0.3.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include route modules
app.include_router(health_router)
app.include_router(maintenance_router)
