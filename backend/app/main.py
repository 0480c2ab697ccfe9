import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy import text

from backend.app.api.v1.router import router as v1_router
from backend.app.core.config import settings
from backend.app.db.session import engine

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Échec de connexion au démarrage = process arrêté (pas de retry)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connection OK (pool_size=%s)", settings.db_pool_size)
    yield
    engine.dispose()


app = FastAPI(title="Stock Ledger Analytics", version="0.1.0", lifespan=lifespan)
app.include_router(v1_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("backend.app.main:app", host="0.0.0.0", port=8000)
