"""API endpoints for the route compiler."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from route_compiler.compiler.pipeline import compile_route
from route_compiler.config import CompilerConfig
from route_compiler.errors import RouteCompilerError
from route_compiler.models.route import CompiledRoute, RouteRequest

logger = structlog.get_logger()

router = APIRouter()


def get_config() -> CompilerConfig:
    """Dependency provider for the compiler configuration.

    Override this in tests to inject a fixed configuration:
        app.dependency_overrides[get_config] = lambda: config
    """
    return CompilerConfig.from_env()


@router.post("/compile", response_model=CompiledRoute)
def compile_endpoint(
    request: RouteRequest,
    config: CompilerConfig = Depends(get_config),
) -> CompiledRoute:
    """Compile a route into a relayer multicall.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Route the compiler rejects (unknown pool, empty route, ...): 422
          with the compiler's message
    """
    logger.info(
        "received_route",
        token_in=request.token_in,
        token_out=request.token_out,
        hop_count=len(request.swaps),
        pool_count=len(request.pools),
    )
    try:
        return compile_route(request, config=config)
    except RouteCompilerError as err:
        logger.warning("compile_rejected", error=str(err), error_type=type(err).__name__)
        raise HTTPException(status_code=422, detail=str(err)) from err
