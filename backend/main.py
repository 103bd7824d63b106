import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import config
from database import engine, get_db
from errors import register_exception_handlers
from routers import places, regions, stations
from seed import init_db, table_counts

# =============================================================================
# ログ設定
# =============================================================================
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler()],
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.SEED_ON_STARTUP:
        try:
            result = init_db(engine)
            log.info(f"🌱 Database initialized: {result}")
        except SQLAlchemyError as e:
            # DBに接続できなくても参照系は静的データで応答できる
            log.error(f"Database initialization failed: {e}")
    log.info(f"📚 {config.API_TITLE} ready")
    yield


# FastAPI app
app = FastAPI(
    title=config.API_TITLE,
    version=config.API_VERSION,
    description=config.API_DESCRIPTION,
    lifespan=lifespan,
)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(regions.router)
app.include_router(stations.router)
for router in places.routers:
    app.include_router(router)


@app.get("/")
async def root():
    return {
        "message": config.API_TITLE,
        "version": config.API_VERSION,
        "description": config.API_DESCRIPTION,
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Database connection health check with row counts"""
    try:
        counts = table_counts(db)
        return {"status": "healthy", "database": "connected", "counts": counts}
    except SQLAlchemyError as e:
        log.warning(f"Health check failed: {e}")
        return {"status": "unhealthy", "database": "disconnected"}
