"""FastAPI application for the route compiler."""

import os

import uvicorn
from fastapi import FastAPI

from route_compiler import __version__
from route_compiler.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("ROUTE_COMPILER_HOST", "0.0.0.0")
PORT = int(os.environ.get("ROUTE_COMPILER_PORT", "8000"))
DEBUG = os.environ.get("ROUTE_COMPILER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Balancer Relayer Route Compiler",
    description="Compiles multi-hop join/exit/swap routes into a single relayer multicall",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - ROUTE_COMPILER_HOST: Host to bind to (default: 0.0.0.0)
    - ROUTE_COMPILER_PORT: Port to bind to (default: 8000)
    - ROUTE_COMPILER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "route_compiler.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
