"""
FastAPI server for todocat

Routes:
- GET /basic   → title of the to-do item
- GET /double  → "Todo: <title>, Cat Fact: <text>"
- anything else → 404 with an empty body

Upstream failures are answered with 502 and a plain text message.
"""

import sys
import logging
import argparse
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .clients import UpstreamClient, build_async_client
from .config import (
    AppConfig,
    load_environment,
    setup_logging,
    validate_config
)
from .exceptions import UpstreamError
from .models import ServerConfig
from .services import FanoutService

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Helpers
# ============================================================================

def text_response(body: str, status_code: int = 200) -> Response:
    """Plain text response without a charset parameter"""
    return Response(content=body, status_code=status_code, headers={"content-type": "text/plain"})


def get_fanout_service(request: Request) -> FanoutService:
    """Shared FanoutService created at startup"""
    return request.app.state.fanout


# ============================================================================
# API Endpoints
# ============================================================================

@router.get("/basic")
async def basic(service: FanoutService = Depends(get_fanout_service)):
    """Title of the to-do item"""
    return text_response(await service.handle_basic())


@router.get("/double")
async def double(service: FanoutService = Depends(get_fanout_service)):
    """To-do title and cat fact, composed"""
    return text_response(await service.handle_double())


# ============================================================================
# Error Handlers
# ============================================================================

async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error(
        f"{request.method} {request.url.path} failed: "
        f"upstream={exc.upstream} kind={exc.kind} url={exc.url} - {exc.message}"
    )
    return text_response(f"Upstream {exc.upstream} failed: {exc.message}", status_code=exc.status_code)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with another method are both plain misses
    if exc.status_code in (404, 405):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


# ============================================================================
# Initialization
# ============================================================================

def create_app(server_config: Optional[ServerConfig] = None,
               http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        server_config: Immutable configuration; built from AppConfig when omitted
        http_client: Shared AsyncClient to adopt; one is created (and closed
            on shutdown) when omitted

    Returns:
        FastAPI application
    """
    server_config = server_config or ServerConfig.from_app_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = http_client is None
        client = http_client or build_async_client(timeout=server_config.upstream_timeout)
        upstream = UpstreamClient(client)

        app.state.server_config = server_config
        app.state.fanout = FanoutService(upstream, server_config)
        logger.info(f"Upstreams: todo={server_config.todo_url}, cats={server_config.cats_url}")
        try:
            yield
        finally:
            if owns_client:
                await upstream.aclose()
                logger.info("Upstream client closed")

    app = FastAPI(
        title=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        version=AppConfig.APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan
    )
    app.include_router(router)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    return app


# ============================================================================
# Main
# ============================================================================

def main():
    """
    Main entry point with CLI argument support.

    Supports:
        --env-file: Path to .env file
        --verbose: Enable debug logging
        --host: Server host (default: 127.0.0.1)
        --port: Server port (default: 3000)
        --todo-url: To-do service base URL
        --cats-url: Cat fact service base URL
    """
    parser = argparse.ArgumentParser(
        description="todocat - to-do and cat fact fan-out server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with default .env
  todocat

  # Use custom .env file
  todocat --env-file /path/to/custom.env

  # Point at local upstreams
  todocat --todo-url http://localhost:8001 --cats-url http://localhost:8002

  # Custom host and port
  todocat --host 0.0.0.0 --port 9000 --verbose
        """
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file (default: .env)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )

    parser.add_argument(
        "--host",
        default=None,
        help=f"Server host (default: {AppConfig.HOST})"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help=f"Server port (default: {AppConfig.PORT})"
    )

    parser.add_argument(
        "--todo-url",
        default=None,
        help=f"To-do service base URL (default: {AppConfig.TODO_URL})"
    )

    parser.add_argument(
        "--cats-url",
        default=None,
        help=f"Cat fact service base URL (default: {AppConfig.CATS_URL})"
    )

    parser.add_argument(
        "--log-file",
        help="Path to log file (optional)"
    )

    args = parser.parse_args()

    if args.env_file:
        load_environment(args.env_file)
        AppConfig.reload()

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        server_config = ServerConfig.from_app_config(
            todo_url=args.todo_url,
            cats_url=args.cats_url,
            host=args.host,
            port=args.port
        )
        validate_config(server_config)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    app = create_app(server_config)

    logger.info(f"Starting {AppConfig.APP_NAME} v{AppConfig.APP_VERSION}")
    logger.info(f"Listening on http://{server_config.host}:{server_config.port}")

    uvicorn.run(
        app,
        host=server_config.host,
        port=server_config.port,
        log_level="debug" if args.verbose else "info"
    )


if __name__ == "__main__":
    main()
