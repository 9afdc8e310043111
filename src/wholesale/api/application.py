"""FastAPI application factory for the wholesale API."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.domain import Domain

from wholesale.api.errors import register_exception_handlers
from wholesale.api.routes import brand_router, cart_router, product_router
from wholesale.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

API_PREFIX = "/api"


def create_app(domain: Domain) -> FastAPI:
    """Build the app around an initialized domain."""
    app = FastAPI(
        title="Wholesale Cart API",
        description="Multi-brand wholesale catalogue and shopping cart",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for API requests."""
        if not request.url.path.startswith(API_PREFIX):
            # Health check, docs
            return await call_next(request)

        add_context(method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    app.include_router(brand_router, prefix=API_PREFIX)
    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(cart_router, prefix=API_PREFIX)

    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    logger.info("API application created", domain=domain.name, prefix=API_PREFIX)
    return app
