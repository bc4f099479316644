from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.cache import TTLCache
from app.core.database import init_db
from app.core.logging import configure_logging
from app.core.scheduler import start_scheduler, stop_scheduler
from app.endpoints import budget, classes, planner, quiz, summary, utility
from app.middleware.exceptions import global_exception_handler, http_exception_handler, validation_exception_handler
from app.middleware.logging import RequestLoggingMiddleware

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

# one cache per process, handed to handlers through deps.get_cache
app.state.cache = TTLCache(default_ttl=settings.CACHE_DEFAULT_TTL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(utility.router, tags=["Utility"])
app.include_router(classes.router, prefix=f"{settings.API_PREFIX}/classes", tags=["Classes"])
app.include_router(budget.router, prefix=f"{settings.API_PREFIX}/budget", tags=["Budget"])
app.include_router(planner.router, prefix=f"{settings.API_PREFIX}/planner", tags=["Planner"])
app.include_router(summary.router, prefix=f"{settings.API_PREFIX}/summary", tags=["Summary"])
app.include_router(quiz.router, prefix=f"{settings.API_PREFIX}/quiz", tags=["Quiz Results"])

@app.on_event("startup")
async def startup_event():
    if not settings.TESTING:
        configure_logging()
    init_db()
    start_scheduler(app.state.cache)

@app.on_event("shutdown")
async def shutdown_event():
    stop_scheduler()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
