import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from fittrack.api.users import router as users_router
from fittrack.api.groups import router as groups_router
from fittrack.api.activities import router as activities_router
from fittrack.api.weight import router as weight_router
from fittrack.api.leaderboard import router as leaderboard_router
from fittrack.api.admin import router as admin_router
from fittrack.api.pages import router as pages_router
from fittrack.core.config import AUTO_CREATE_TABLES, CORS_ORIGINS, IS_PRODUCTION, LOG_LEVEL
from fittrack.core.db import init_db
from fittrack.core.errors import FitTrackError
from fittrack.core.logs import setup_logging
import fittrack.core.events  # Импортируем, чтобы обработчики событий зарегистрировались

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        init_db()
    logger.info("🚀 FitTrack запущен")
    yield


app = FastAPI(title="FitTrack", lifespan=lifespan)

# Добавляем CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FitTrackError)
async def fittrack_error_handler(request: Request, exc: FitTrackError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Необработанная ошибка в {request.method} {request.url.path}")
    detail = "Internal server error" if IS_PRODUCTION else str(exc)
    return JSONResponse(status_code=500, content={"detail": detail})


# Подключаем API-маршруты
app.include_router(users_router, prefix="/api", tags=["Users"])
app.include_router(groups_router, prefix="/api/groups", tags=["Groups"])
app.include_router(activities_router, prefix="/api/activities", tags=["Activities"])
app.include_router(weight_router, prefix="/api/weight", tags=["Weight"])
app.include_router(leaderboard_router, prefix="/api", tags=["Leaderboard"])
app.include_router(admin_router, prefix="/api/admin", tags=["Admin"])
app.include_router(pages_router)


@app.get("/health")
def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
