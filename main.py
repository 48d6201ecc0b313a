import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from dotenv import load_dotenv
from starlette.responses import JSONResponse

from core.exceptions import BusinessException

load_dotenv()

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Request Service")
    logger.info(f"Upstream API: {os.getenv('UPSTREAM_API_URL', '(not configured)')}")

    yield

    logger.info("Shutting down Request Service")


app = FastAPI(
    title="Request Service",
    description="Single-shot JSON request relay",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.warning(f"error: {exc.message}, status code: {exc.status_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "status": exc.status_code
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={
                "message": str(exc),
                "status": 500
            })


# Include routers
from api.routers.relay_router import router as relay_router
app.include_router(relay_router)


@app.get("/")
async def root():
    return {
        "service": "Request Service",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "upstream_configured": bool(os.getenv("UPSTREAM_API_URL"))
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
