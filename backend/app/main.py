import traceback
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.database.mongo import init_mongo, close_mongo
from app.routers import auth, job, reference, visitor
from app.utils.exceptions import create_error_response
from app.utils.logger import app_logger

# Connect MongoDB and register Beanie documents on startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo()
    app_logger.info(f"Server running on http://{settings.HOST}:{settings.PORT}")
    yield
    # Release the MongoDB client on shutdown
    await close_mongo()

app = FastAPI(
    title="Job Board API",
    lifespan=lifespan
)

@app.get("/")
async def root():
    """API root"""
    return {
        "message": "Job Board API",
        "version": "1.0.0",
        "docs": "/docs",
    }

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every error leaves the API as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    app_logger.warning(f"Invalid payload on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=create_error_response("Invalid request payload"),
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    app_logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content=create_error_response("Internal server error"),
    )

# Routers
app.include_router(reference.router)
app.include_router(job.router)
app.include_router(auth.router)
app.include_router(visitor.router)

def run():
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
