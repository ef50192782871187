from datetime import datetime
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.observability import RequestLogMiddleware, configure_logging
from app.database import create_db_and_tables
from app.api import auth, automation, dashboard, expense, income
from fastapi.middleware.cors import CORSMiddleware

settings = get_settings()
configure_logging(settings.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()  # en producción, preferir las migraciones de Alembic
    yield

app = FastAPI(title="Finance Tracker", version="0.1.0", lifespan=lifespan)

app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(income.router)
app.include_router(expense.router)
app.include_router(automation.router)
app.include_router(dashboard.router)

@app.get("/health")
def health():
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.utcnow().isoformat(),
    }
