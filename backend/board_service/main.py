import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from board_service.config import LOG_LEVEL
from board_service.database import init_db
from board_service.graphql.schema import graphql_router
from board_service.routes.auth import router as auth_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up, initialising database")
    await init_db()
    logger.info("Database ready")
    yield


app = FastAPI(lifespan=lifespan)

app.include_router(auth_router, prefix="/api")
app.include_router(graphql_router, prefix="/graphql")


@app.get("/api/health")
async def health():
    return {"status": "ok"}
