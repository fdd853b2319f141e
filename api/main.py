import logging
import os
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core import db
from nvag import router as nvag_router
from ojakh import router as ojakh_router
from tasks import router as tasks_router

logger = logging.getLogger(__name__)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per logical database, alive for the whole process.
    ojakh_db = db.Database("ojakh", "DATABASE_URL")
    nvag_db = db.Database("nvag", "NVAG_DATABASE_URL", fallback_env_var="DATABASE_URL")
    try:
        await ojakh_db.connect()
        await nvag_db.connect()
        app.state.ojakh_db = ojakh_db
        app.state.nvag_db = nvag_db
        yield
    finally:
        await nvag_db.close()
        await ojakh_db.close()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(asyncpg.PostgresError)
@app.exception_handler(asyncpg.InterfaceError)
@app.exception_handler(OSError)
async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Storage failures on read paths; details stay in the log.
    logger.exception("storage_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Server Error"})


app.include_router(ojakh_router.router, prefix="/ojakh", tags=["ojakh"])
app.include_router(ojakh_router.router, tags=["ojakh"], include_in_schema=False)
app.include_router(nvag_router.router, prefix="/nvag", tags=["nvag"])
app.include_router(nvag_router.router, tags=["nvag"], include_in_schema=False)
app.include_router(tasks_router.router, tags=["tasks"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Welcome to the Ojakh Recipe API!"
