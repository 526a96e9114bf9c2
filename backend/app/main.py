from contextlib import asynccontextmanager
from fastapi import FastAPI
from .core.database import create_db_and_tables
from .core.errors import register_exception_handlers
from .core.logging import LoggingMiddleware, configure_logging
from .core.settings import settings
from .models.Token import Token # Import models to register them with SQLModel

from .tokens.router import router as tokens_router

configure_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(LoggingMiddleware)
register_exception_handlers(app)

app.include_router(tokens_router)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
