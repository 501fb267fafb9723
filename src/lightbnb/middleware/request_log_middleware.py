from logging import Logger, getLogger
from typing import Final

from starlette.types import ASGIApp, Message, Receive, Scope, Send

_logger: Final[Logger] = getLogger(__name__)


class RequestLogMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_status_log(message: Message) -> None:
            if message["type"] == "http.response.start":
                _logger.debug(
                    "Created response {} for {} {}".format(
                        message["status"], scope["method"], scope["path"]
                    )
                )
            await send(message)

        _logger.debug("Received request {} {}".format(scope["method"], scope["path"]))
        await self.app(scope, receive, send_with_status_log)
