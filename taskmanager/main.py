import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from taskmanager.config import CORS_ORIGINS, LOG_LEVEL
from taskmanager.database import Base, engine
from taskmanager.errors import APIError
from taskmanager.models import task as _task_model, user as _user_model  # noqa: F401 register tables
from taskmanager.routers import tasks, users

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Store ready at %s", engine.url.render_as_string(hide_password=True))
    yield
    # the pool lives for the whole process and is released only here
    engine.dispose()
    logger.info("Store connections closed")


app = FastAPI(title="Task Management", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(tasks.router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Task management server is running"


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content={"error": True, "message": exc.message})


# Generic error handler to return JSON errors for unexpected exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": True, "message": "Internal server error"})
