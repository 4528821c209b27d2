import logging

import httpx
import uvicorn
from fastapi import FastAPI

from .ccb import WhoIsService
from .client import CCBClient
from .config import Settings
from .errors import WhoIsError
from .schemas import WhoIsRequest, WhoIsResponse

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None
) -> FastAPI:
    settings = settings or Settings()
    service = WhoIsService(
        CCBClient(settings, transport=transport),
        policy=settings.name_policy,
        surface_errors=settings.surface_remote_errors,
    )
    app = FastAPI()

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # Business failures are reported in the body; the status stays 200.
    # Empty fields are left out of the response, as the Slack app expects.
    @app.post("/WhoIs", response_model=WhoIsResponse, response_model_exclude_defaults=True)
    async def who_is(request: WhoIsRequest):
        try:
            person = await service.who_is(request.name)
        except WhoIsError as e:
            logger.info("WhoIs %r failed: %s", request.name, e)
            return WhoIsResponse(error=str(e))
        return WhoIsResponse(name=person)

    return app


def run() -> None:
    settings = Settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
