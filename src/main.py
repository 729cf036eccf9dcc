# main.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.controllers.autentication_controller import router as auth_router
from application.controllers.company_controller import router as company_router
from application.controllers.unit_controller import router as unit_router
from application.controllers.user_controller import router as user_router
from application.controllers.asset_controller import router as asset_router
from application.controllers.reports_controller import router as reports_router
from infrastructure.config import CORS_ORIGINS, LOG_LEVEL, parse_cors_origins

if not logging.getLogger().handlers:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

logger = logging.getLogger("asset_monitor")

app = FastAPI(title="Asset Monitor API", version="0.1.0")

origins = parse_cors_origins(CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["OPTIONS", "GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "request method=%s path=%s status=%s duration_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


# error bodies are a bare message (or {}), never {"detail": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.detail if exc.detail else {},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content=f"[ERROR] {'; '.join(messages)}")


app.include_router(auth_router)
app.include_router(company_router)
app.include_router(unit_router)
app.include_router(user_router)
app.include_router(asset_router)
app.include_router(reports_router)
