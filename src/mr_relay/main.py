# src/mr_relay/main.py
import argparse
import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mr_relay import __version__
from mr_relay.config import Settings
from mr_relay.errors import DeliveryError
from mr_relay.events.dispatcher import MergeRequestDispatcher
from mr_relay.models.webhook import GitLabMREvent
from mr_relay.notifiers.base import Notifier
from mr_relay.notifiers.wecom import WeComClient


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("MR relay starting...")
    yield
    logger.info("MR relay shutting down...")


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_dispatcher(notifier: Notifier = Depends(get_notifier)) -> MergeRequestDispatcher:
    return MergeRequestDispatcher(notifier)


def create_app(settings: Settings | None = None, notifier: Notifier | None = None) -> FastAPI:
    """Build the relay app around a single long-lived notifier."""
    if notifier is None:
        settings = settings or Settings()
        notifier = WeComClient(
            key=settings.wecom_key,
            base_url=settings.wecom_url,
            timeout=settings.request_timeout,
        )

    app = FastAPI(title="MR Relay", version=__version__, lifespan=lifespan)
    app.state.notifier = notifier

    @app.get("/ping")
    async def ping():
        return {"message": "pong"}

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    @app.post("/gitlab/mr")
    async def gitlab_mr(
        request: Request,
        dispatcher: MergeRequestDispatcher = Depends(get_dispatcher),
    ):
        body = await request.body()
        try:
            event = GitLabMREvent.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Rejected merge request event: {e}")
            return JSONResponse(status_code=400, content={"error": str(e)})

        try:
            await dispatcher.handle(event)
        except DeliveryError as e:
            logger.error(f"Failed to relay merge request event: {e}")
            return JSONResponse(status_code=500, content={"error": str(e)})

        return {"status": "ok"}

    return app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mr-relay",
        description="Relay GitLab merge request events to a WeCom group bot.",
    )
    parser.add_argument("--key", default=None, help="WeCom bot key (default: $MR_RELAY_WECOM_KEY)")
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Settings from env/.env, with command-line flags taking precedence."""
    overrides = {
        "wecom_key": args.key,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    return Settings(**{name: value for name, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> None:
    settings = load_settings(parse_args(argv))
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
