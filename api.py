from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from app.api.router import api_router
from app.database import init_database
from app.settings import settings
import logging

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Planet Registry & Moderation API",
    description="""
    🪐 **Community Planet Registry**

    Visitors propose planets; administrators review the queue and publish or
    discard each submission.

    ## 🎯 **Main Features:**

    ### 📝 **Submissions**
    - All five fields required (name, size, atmosphere, type, distance from the Sun)
    - Case-insensitive duplicate detection against published and pending planets
    - Realistic distance bounds (outside the Sun, below 1e12 km by default)

    ### ✅ **Moderation**
    - Approve: the submission is published and leaves the queue
    - Reject: the submission is discarded
    - Both actions require the admin flag of the session

    ## 🛠 **Available Endpoints:**

    - **`GET /planets`** - Published and pending planets
    - **`POST /planets/submit`** - Submit a planet for moderation
    - **`POST /planets/add`** - Publish directly (admin)
    - **`POST /planets/approve/{id}`** - Approve a submission (admin)
    - **`POST /planets/reject/{id}`** - Reject a submission (admin)
    """,
    version="1.0.0",
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_redoc else None
)

app.add_middleware(
    CORSMiddleware,
    **settings.get_cors_config()
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key
)

app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse("Something broke!", status_code=500)


# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    log.info("🚀 Initializing database...")
    init_database()
    log.info("✅ Database initialized successfully!")

@app.get("/")
async def root():
    return {
        "message": "Planet Registry & Moderation API Running ... 🪐",
        "version": "1.0.0",
        "status": "operational",
        "endpoints": {
            "planets": "/planets",
            "submit": "/planets/submit",
            "approve": "/planets/approve/{id}",
            "reject": "/planets/reject/{id}"
        },
        "documentation": "/docs"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
        reload=settings.api_reload
    )
