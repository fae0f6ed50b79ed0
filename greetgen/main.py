from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from greetgen.core.config import Settings, get_settings
from greetgen.core.errors import ValidationError
from greetgen.core.security import key_status
from greetgen.schemas.response import ErrorResponse, GenerateResponse
from greetgen.services.message_service import MessageService, parse_request
from greetgen.utils.logger import configure_logging

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def _read_json(request: Request):
    try:
        return await request.json()
    except ValueError:
        # Empty or non-JSON body fails prompt validation downstream
        return {}


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    service = MessageService(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await service.close()

    app = FastAPI(title="Greeting Message Generator", lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def on_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump())

    async def handle_generate(request: Request) -> GenerateResponse:
        body = parse_request(await _read_json(request))
        return await service.generate(body)

    @app.get("/")
    async def root():
        return {
            "message": "Greeting Message Generator API",
            "docs": "/docs",
            "health": "/health",
            "generate": "POST /generate",
        }

    @app.get("/health")
    async def get_health():
        return {"status": "ok", "providers": key_status(settings)}

    @app.api_route("/ping", methods=ALL_METHODS)
    @app.api_route("/api/ping", methods=ALL_METHODS)
    async def ping(request: Request):
        if request.method == "GET":
            return PlainTextResponse("pong")
        return {"ok": True, "method": request.method}

    @app.post("/generate", response_model=GenerateResponse)
    async def post_generate(request: Request) -> GenerateResponse:
        return await handle_generate(request)

    @app.api_route("/api/generate", methods=ALL_METHODS, response_model=GenerateResponse)
    async def api_generate(request: Request):
        if request.method != "POST":
            return JSONResponse(status_code=405, content=ErrorResponse(error="Method not allowed").model_dump())
        return await handle_generate(request)

    return app


app = create_app()
