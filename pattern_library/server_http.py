#!/usr/bin/env python3
"""
Pattern Library REST API
Serves the pattern catalog as JSON over HTTP (Starlette + uvicorn).

Endpoints (under config.api_prefix, "/api" by default):
- GET /patterns                      - every pattern
- GET /patterns/search?q=...         - keyword search
- GET /patterns/category/{category}  - patterns in one category
- GET /patterns/{category}/{name}    - full markdown of one pattern
- GET /health                        - status check (always at the root)
"""

from typing import Optional

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Mount, Route

from pattern_library import __package_name__, __version__
from pattern_library.catalog import (
    InvalidPatternKeyError,
    PatternCatalog,
    PatternEntry,
    PatternLibraryError,
    PatternNotFoundError,
)
from pattern_library.config import Config
from pattern_library.utils import Logger


class PatternAPI:
    """Route handlers bound to one catalog."""
    
    def __init__(self, catalog: PatternCatalog, logger: Logger):
        self.catalog = catalog
        self.logger = logger
    
    def _serialize(self, entry: PatternEntry) -> dict:
        data = entry.to_dict()
        data["url"] = self.catalog.pattern_url(entry.category, entry.name)
        return data
    
    def _server_error(self, error: PatternLibraryError, request: Request) -> JSONResponse:
        self.logger.error(f"{request.method} {request.url.path} failed: {error}")
        return JSONResponse({"error": str(error)}, status_code=500)
    
    async def list_patterns(self, request: Request) -> JSONResponse:
        try:
            entries = self.catalog.list_all()
        except PatternLibraryError as e:
            return self._server_error(e, request)
        return JSONResponse([self._serialize(e) for e in entries])
    
    async def search_patterns(self, request: Request) -> JSONResponse:
        query = request.query_params.get("q", "")
        try:
            entries = self.catalog.search(query)
        except PatternLibraryError as e:
            return self._server_error(e, request)
        return JSONResponse([self._serialize(e) for e in entries])
    
    async def list_category(self, request: Request) -> JSONResponse:
        category = request.path_params["category"]
        try:
            entries = self.catalog.by_category(category)
        except PatternLibraryError as e:
            return self._server_error(e, request)
        return JSONResponse([self._serialize(e) for e in entries])
    
    async def get_pattern(self, request: Request) -> JSONResponse:
        category = request.path_params["category"]
        name = request.path_params["name"]
        try:
            document = self.catalog.get(category, name)
        except PatternNotFoundError:
            return JSONResponse({"error": "Pattern not found"}, status_code=404)
        except InvalidPatternKeyError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        except PatternLibraryError as e:
            return self._server_error(e, request)
        
        return JSONResponse({
            **document.to_dict(),
            "url": self.catalog.pattern_url(category, name),
        })
    
    async def health_check(self, request: Request) -> PlainTextResponse:
        try:
            count = f"{len(self.catalog.list_all())}"
            status = "Running"
        except PatternLibraryError as e:
            count = "unknown"
            status = f"Degraded ({e})"
        return PlainTextResponse(
            f"Pattern Library API\n"
            f"Version: {__version__}\n"
            f"Status: {status}\n"
            f"Patterns: {count}\n",
            status_code=200 if status == "Running" else 503,
        )


def create_app(config: Config, logger: Optional[Logger] = None) -> Starlette:
    """Build the Starlette app for one configured patterns directory."""
    logger = logger or Logger(name=f"{__package_name__}.http", level=config.log_level)
    api = PatternAPI(PatternCatalog(config, logger), logger)
    
    # Static segments ("search", "category") must precede /{category}/{name}
    pattern_routes = [
        Route("/patterns", endpoint=api.list_patterns, methods=["GET"]),
        Route("/patterns/search", endpoint=api.search_patterns, methods=["GET"]),
        Route("/patterns/category/{category}", endpoint=api.list_category, methods=["GET"]),
        Route("/patterns/{category}/{name}", endpoint=api.get_pattern, methods=["GET"]),
    ]
    routes = [Route("/health", endpoint=api.health_check, methods=["GET"])]
    if config.api_prefix:
        routes.append(Mount(config.api_prefix, routes=pattern_routes))
    else:
        routes.extend(pattern_routes)
    
    return Starlette(
        routes=routes,
        middleware=[Middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"])],
    )


async def run_http(config: Config):
    """Run the REST server."""
    import uvicorn
    
    app = create_app(config)
    server = uvicorn.Server(uvicorn.Config(
        app,
        host=config.http_host,
        port=config.http_port,
        log_level=config.log_level.lower(),
    ))
    
    print(f"Pattern Library API starting on http://{config.http_host}:{config.http_port}")
    print(f"Access at: http://localhost:{config.http_port}{config.api_prefix}/patterns")
    
    await server.serve()
