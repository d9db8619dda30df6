"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from giftlist.api import activities, auth, family_groups, secret_notes, wishlists
from giftlist.config import get_settings
from giftlist.database import init_db
from giftlist.services.errors import GiftListError

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    yield


app = FastAPI(
    title="Gift List API",
    description="Family wishlists with hidden gift reservations",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(GiftListError)
async def gift_list_error_handler(request: Request, exc: GiftListError) -> JSONResponse:
    """Report a domain error with its status and message."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a 400 with the validation details."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# Register routers
app.include_router(auth.router)
app.include_router(family_groups.router)
app.include_router(wishlists.router)
app.include_router(activities.router)
app.include_router(secret_notes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
