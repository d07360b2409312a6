from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies.cors import DISCORD_PROXY_CORS, STRIPE_PROXY_CORS
from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server.bot_middleware import BotMiddleware
from server.lifespan import lifespan
from server.middleware import ProxyAwareCORSMiddleware, RequestContextMiddleware

logger = get_module_logger()
settings = get_settings()

# Proxy endpoints set their own CORS headers
PROXY_PREFIXES = ("/discord/", "/stripe/")


handler = FastAPI(title="bodax-notify", lifespan=lifespan)
setup_rate_limiter(handler)


@handler.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
    return await http_exception_handler(request, exc)


@handler.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    content = {"error": "Invalid request body", "details": jsonable_encoder(exc.errors())}
    path = request.url.path
    if path.startswith("/discord/"):
        return DISCORD_PROXY_CORS.json(content, 400)
    if path.startswith("/stripe/"):
        return STRIPE_PROXY_CORS.json(content, 400)
    return JSONResponse(status_code=400, content=content)


@handler.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


handler.add_middleware(BotMiddleware)
handler.add_middleware(
    ProxyAwareCORSMiddleware,
    exempt_prefixes=PROXY_PREFIXES,
    allow_origins=settings.server.allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(RequestContextMiddleware)

handler.include_router(api_router)
