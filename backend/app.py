"""
Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from core.config import API_CONFIG, SERVER_CONFIG
from core.utils import get_logger
from routers import genmap

import uvicorn
from datetime import datetime
from models import HealthResponse
from models import ApiInfoResponse
from models import ErrorDetail, ErrorResponse


# Initialize logger
logger = get_logger("main")

# Initialize FastAPI app
app = FastAPI(
    title=API_CONFIG["title"],
    version=API_CONFIG["version"],
    description=API_CONFIG["description"]
)

# Include routers
app.include_router(genmap.router, tags=["genmap"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or invalid request bodies are reported as 400"""
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in err.get("loc", ())[1:]) or None,
            message=err.get("msg", "invalid value")
        )
        for err in exc.errors()
    ]
    logger.warning(f"Invalid request to {request.url.path}: {[d.message for d in details]}")
    body = ErrorResponse(
        error="bad_request",
        message="Invalid request body",
        details=details,
        status_code=400
    )
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return ApiInfoResponse(
        message="Typhoon Map API is running!",
        version=API_CONFIG["version"],
        status="healthy"
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )

if __name__ == "__main__":
    logger.info("Starting Typhoon Map API server", extra={
        "host": SERVER_CONFIG["host"],
        "port": SERVER_CONFIG["port"]
    })
    uvicorn.run(
        app,
        host=SERVER_CONFIG["host"],
        port=SERVER_CONFIG["port"],
        reload=False
    )
