# backend/materials_service/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from materials_service.api import materials
from materials_service.core.config import settings
from materials_service.core.exceptions import MaterialServiceError
from materials_service.core.init_db import init_db
from materials_service.core.logging_config import configure_logging
from materials_service.core.reference_data import ReferenceData

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Materials Inventory API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MaterialServiceError)
async def material_error_handler(request: Request, exc: MaterialServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} error: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.on_event("startup")
async def startup():
    app.state.reference_data = ReferenceData.from_files(
        settings.UNITS_FILE, settings.TAX_RATES_FILE
    )
    await init_db()
    logger.info(f"Server running on http://{settings.HOST}:{settings.PORT}")


app.include_router(materials.router)


@app.get("/")
async def root():
    return {"message": "Materials inventory API"}


@app.get("/health")
async def health():
    return {"status": "ok"}
