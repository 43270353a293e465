"""
homefix/main.py

Application entrypoint for the HomeFix store API.
- Initializes structured logging
- Sets up FastAPI application and middlewares
- Registers JSON error rendering and all API routers
- Integrates rate limiting via SlowAPI
- Configures CORS
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from homefix.auth.routes import router as auth_router
from homefix.core.config import settings
from homefix.core.exceptions import register_exception_handlers
from homefix.core.limiter import limiter
from homefix.core.logging import init_logging
from homefix.database.init_db import init_db
from homefix.service.routes import router as service_router
from homefix.service_request.routes import router as request_router
from homefix.users.routes import router as users_router
from homefix.utils.middleware import LoggingMiddleware, SecurityHeadersMiddleware
from homefix.worker.routes import router as worker_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await init_db()
    yield


# -----------------------------
# FastAPI App Initialization
# -----------------------------
init_logging()
app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)

# -----------------------------
# Error Handling
# -----------------------------
register_exception_handlers(app)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

# -----------------------------
# Middleware Configuration
# -----------------------------
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# API Router Registration
# -----------------------------
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(service_router)
app.include_router(worker_router)
app.include_router(request_router)


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
