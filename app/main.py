import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.database.supabase_client import SupabaseClient, check_connection
from app.modules.auth import routes as auth_routes
from app.modules.system import routes as system_routes
from app.modules.categories import routes as categories_routes
from app.modules.projects import routes as projects_routes
from app.modules.engagement import routes as engagement_routes
from app.modules.search import routes as search_routes
from app.modules.profiles import routes as profiles_routes
from app.modules.availability import routes as availability_routes
from app.modules.notifications import routes as notifications_routes
from app.modules.notifications import listener as notifications_listener
from app.modules.analytics import routes as analytics_routes
from app.modules.hiring import routes as hiring_routes
from app.modules.freelance import routes as freelance_routes
from app.modules.jobs import routes as jobs_routes
from app.modules.assets import routes as assets_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(system_routes.router, prefix="/api/v1")
app.include_router(categories_routes.router, prefix="/api/v1")
app.include_router(projects_routes.router, prefix="/api/v1")
app.include_router(engagement_routes.router, prefix="/api/v1")
app.include_router(search_routes.router, prefix="/api/v1")
app.include_router(profiles_routes.router, prefix="/api/v1")
app.include_router(availability_routes.router, prefix="/api/v1")
app.include_router(notifications_routes.router, prefix="/api/v1")
app.include_router(analytics_routes.router, prefix="/api/v1")
app.include_router(hiring_routes.router, prefix="/api/v1")
app.include_router(freelance_routes.router, prefix="/api/v1")
app.include_router(jobs_routes.router, prefix="/api/v1")
app.include_router(assets_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.is_supabase_configured:
        logger.warning("Supabase is not configured; backend routes will return 503 until it is")

    # Realtime listener for new-project notifications (off unless NOTIFICATIONS_REALTIME_ENABLED=true)
    await notifications_listener.start_project_listener()


@app.on_event("shutdown")
async def shutdown_event():
    await notifications_listener.stop_project_listener()
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": "Welcome to nexus-backend", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness check: Supabase must be configured and reachable."""
    if not settings.is_supabase_configured:
        return JSONResponse(status_code=503, content={"status": "not ready", "reason": "backend not configured"})
    if not check_connection(SupabaseClient.get_client()):
        return JSONResponse(status_code=503, content={"status": "not ready", "reason": "backend unreachable"})
    return {"status": "ready"}
