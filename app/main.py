import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core import config
from app.core.database import init_db
from app.core.exceptions import AppException
from app.core.logger import configure_logging
# Importamos los controladores
from app.controllers import admin_controller, entidades_controller

configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Crea las tablas que falten al arrancar
    init_db()
    yield


app = FastAPI(title=config.API_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# MANEJO DE ERRORES
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    elif exc.status_code == 404:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errores = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path}: petición inválida ({errores})")
    return JSONResponse(status_code=400, content={"message": f"Petición inválida: {errores}"})


# REGISTRO DE RUTAS
for router in entidades_controller.routers:
    app.include_router(router)
app.include_router(admin_controller.router)


@app.get("/")
def root():
    return {"message": "API Autogestión SENA - en línea"}
