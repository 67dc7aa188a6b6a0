import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from dotenv import load_dotenv
import uvicorn

from utils.logging_config import setup_logging

# Load .env
load_dotenv()
setup_logging()

# Fails fast when JWT_SECRET is missing
from utils.security import SECRET_KEY  # noqa: F401,E402
from database import check_connection, get_session_context, init_db  # noqa: E402
from routers import (  # noqa: E402
    auth_router,
    users_router,
    units_router,
    payments_router,
    chats_router,
)
from services.user_service import UserService  # noqa: E402
from utils.errors import AuthenticationError, AuthorizationError  # noqa: E402

logger = logging.getLogger("buildingdesk")


def bootstrap_super_admin() -> None:
    username = os.getenv("SUPER_ADMIN_USERNAME")
    password = os.getenv("SUPER_ADMIN_PASSWORD")
    if not username or not password:
        logger.info("SUPER_ADMIN_USERNAME/SUPER_ADMIN_PASSWORD not set; skipping super admin bootstrap")
        return
    name = os.getenv("SUPER_ADMIN_NAME", "Super Admin")
    with get_session_context() as db:
        if UserService.ensure_super_admin(db, username, password, name):
            logger.info("Super admin %s created", username)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting building management API")
    if os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true":
        init_db()
    bootstrap_super_admin()
    yield
    logger.info("Shutting down building management API")


# App instance
app = FastAPI(title="Building Management API", version="1.0.0", lifespan=lifespan)

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handling
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Generic message only; field-level detail is not part of the contract
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid input"})


@app.exception_handler(AuthenticationError)
async def authentication_exception_handler(request: Request, exc: AuthenticationError):
    return Response(status_code=status.HTTP_401_UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"})


@app.exception_handler(AuthorizationError)
async def authorization_exception_handler(request: Request, exc: AuthorizationError):
    return Response(status_code=status.HTTP_403_FORBIDDEN)


@app.get("/health", tags=["health"])
def health():
    if not check_connection():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "unavailable"},
        )
    return {"status": "ok", "database": "connected"}


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(units_router)
app.include_router(payments_router)
app.include_router(chats_router)


# 404 Fallback / 500 Middleware
@app.middleware("http")
async def not_found_middleware(request: Request, call_next):
    try:
        response = await call_next(request)
        if response.status_code == 404 and "endpoint" not in request.scope:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return response
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
