from starlette.middleware.base import BaseHTTPMiddleware


class BotMiddleware(BaseHTTPMiddleware):
    """Expose the process-wide Discord bot as ``request.state.bot``.

    The bot is read from ``app.state.bot`` on every request, so a bot that
    finishes starting after the middleware stack is built is still seen.
    """

    async def dispatch(self, request, call_next):
        request.state.bot = getattr(request.app.state, "bot", None)
        response = await call_next(request)
        return response
