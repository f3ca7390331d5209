from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from database import check_connection, get_session_context, init_db
from errors import ConstraintViolation, StorageFailure
from routers import owners_router, properties_router, property_images_router, property_traces_router
from seed import seed_catalog
from utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.AUTO_CREATE_TABLES:
        init_db()
    if config.SEED_ON_STARTUP:
        with get_session_context() as db:
            seed_catalog(db)
    logger.info("Catalog API started")
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Real Estate Catalog API", lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(owners_router)
    app.include_router(properties_router)
    app.include_router(property_images_router)
    app.include_router(property_traces_router)

    @app.exception_handler(ConstraintViolation)
    async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message, "details": exc.details},
        )

    @app.exception_handler(StorageFailure)
    async def storage_failure_handler(request: Request, exc: StorageFailure):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "database": check_connection()}

    return app


# App instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
