"""Balancer relayer route compiler."""

from route_compiler.compiler import build_calls, compile_route
from route_compiler.config import DEFAULT_COMPILER_CONFIG, CompilerConfig

__version__ = "0.1.0"
__all__ = ["CompilerConfig", "DEFAULT_COMPILER_CONFIG", "build_calls", "compile_route", "__version__"]
