from contextlib import asynccontextmanager
import asyncio
import logging
import sqlalchemy
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from reviewlens.core.database import database
from reviewlens.api import analysis, reviews
from reviewlens.middlewares.access_logger import AccessLoggingMiddleware
from reviewlens.middlewares.logging import setup_logging
from reviewlens.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from reviewlens.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
)
from reviewlens.core.config import settings

logger = logging.getLogger(__name__)

is_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global is_ready

    max_retries = 10
    delay_seconds = 3

    for attempt in range(max_retries):
        try:
            async with database.engine.connect() as conn:
                await conn.execute(sqlalchemy.text("SELECT 1"))
            logger.info("✅ Successfully connected to Postgres!")
            is_ready = True
            break
        except Exception as e:
            logger.warning(
                f"❌ Postgres not ready (attempt {attempt + 1}/{max_retries}) - {e}"
            )
            await asyncio.sleep(delay_seconds)
    else:
        raise RuntimeError("🚨 Could not connect to Postgres after retries!")

    yield

    is_ready = False
    await database.engine.dispose()


# ✅ SETUP LOGGING FIRST
setup_logging()

logger.info(f"Starting {settings.SERVICE_NAME} in {settings.ENV} mode")

app = FastAPI(
    title="ReviewLens API",
    description="Sentiment analytics for restaurant reviews",
    version="1.0.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(analysis.router)
app.include_router(reviews.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    return {"status": "ready"} if is_ready else Response(status_code=503)


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
