# shopapi/middleware/db_middleware.py

from starlette.types import ASGIApp, Receive, Scope, Send
from shopapi.utils import database

class DBSessionMiddleware:
    """Кладёт AsyncSession в request.state.db; без базы там None."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        state = scope.setdefault("state", {})
        session_factory = database.AsyncSessionLocal
        state["db"] = session_factory() if session_factory is not None else None
        try:
            await self.app(scope, receive, send)
        finally:
            # закрываем сессию только после завершения запроса
            if state["db"] is not None:
                await state["db"].close()
