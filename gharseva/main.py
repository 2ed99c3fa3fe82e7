import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL, SERVICE_NAME
from .middleware import RequestLoggingMiddleware
from .rabbitmq import publisher
from .routes import router

logging.basicConfig(
    level=LOG_LEVEL,
    format="[gharseva] %(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

app = FastAPI(title="GharSeva Match Service")

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # the browser client expects the match envelope even for bad input
    if request.url.path == "/match-workers":
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": "Invalid match request",
                "details": jsonable_errors(exc),
                "matchedWorkers": [],
            },
        )
    return await request_validation_exception_handler(request, exc)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()]


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "events_enabled": publisher.enabled,
    }


@app.on_event("startup")
async def startup():
    # never crash the service if RabbitMQ is temporarily unavailable
    try:
        await publisher.start()
    except Exception as e:
        logger.warning("RabbitMQ connect failed at startup; continuing without events: %s", e)


@app.on_event("shutdown")
async def shutdown():
    try:
        await publisher.stop()
    except Exception:
        logger.exception("RabbitMQ close failed")
