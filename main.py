import logging
import os

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session

from config import BLOB_BACKEND, CORS_ORIGINS, PORT, UPLOAD_DIR
from database import check_connection, get_session
from dependencies import create_access_token
from logging_config import configure_logging
from routers import api_routers
from schemas.user import LoginRequest, LoginResponse, UserResponse
from services.errors import ServiceError, Unauthorized
from services.user_service import UserService

configure_logging()
logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="Reservation Back-office API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static uploads (local blob backend only)
if BLOB_BACKEND == "local":
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=UPLOAD_DIR), name="uploads")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.post("/api/login", response_model=LoginResponse, tags=["auth"])
def login_user(body: LoginRequest, db: Session = Depends(get_session)):
    user = UserService.authenticate(db, body.email, body.password)
    if user is None:
        logger.info("Failed login for %s", body.email)
        raise Unauthorized("Invalid credentials")

    return LoginResponse(token=create_access_token(user), user=UserResponse.model_validate(user))


@app.get("/api/health", tags=["health"])
def health():
    database_ok = check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={"status": "ok" if database_ok else "degraded", "database": database_ok},
    )


for router in api_routers:
    app.include_router(router)


# 404 Fallback Middleware
@app.middleware("http")
async def not_found_middleware(request: Request, call_next):
    try:
        response = await call_next(request)
        # Only unmatched paths; 404s raised by a route keep their own detail
        if response.status_code == 404 and "endpoint" not in request.scope:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return response
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
