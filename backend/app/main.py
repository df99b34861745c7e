"""Household Ledger - household finance tracking API."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.errors import (
    DuplicateUser,
    InvalidCredentials,
    InvalidRangeInput,
    PersistenceError,
    ValidationError,
)
from app.schemas.common import ValidationErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Startup: Create tables and optionally seed
    from app.database import Base, engine, get_db_context
    from app.services.seed_loader import load_seed

    # Import all models so they're registered with Base
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    if settings.seed_on_startup:
        with get_db_context() as db:
            load_seed(db, settings.seed_file)

    logger.info(f"{settings.app_name} started")
    yield
    # Shutdown: cleanup if needed


app = FastAPI(
    title=settings.app_name,
    description="Record and review household transactions",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    body = ValidationErrorResponse(errors=exc.violations)
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(InvalidRangeInput)
async def invalid_range_handler(request: Request, exc: InvalidRangeInput):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(InvalidCredentials)
async def invalid_credentials_handler(request: Request, exc: InvalidCredentials):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Incorrect email or password"},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(DuplicateUser)
async def duplicate_user_handler(request: Request, exc: DuplicateUser):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "Email already registered"})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


# Import and include routers
from app.api import accounts, auth, categories, transactions, users  # noqa: E402

app.include_router(auth.router, prefix="/api")
app.include_router(accounts.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(transactions.router, prefix="/api")
app.include_router(users.router, prefix="/api")
