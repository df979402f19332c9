from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.database import create_db_and_tables
from app.api import auth, insights, savings, settings, subscriptions
from app.routes import currency
from fastapi.middleware.cors import CORSMiddleware

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(LOG_LEVEL)
    create_db_and_tables()
    yield

app = FastAPI(lifespan=lifespan, title="Subscription Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(subscriptions.router)
app.include_router(settings.router)
app.include_router(savings.router)
app.include_router(insights.router)
app.include_router(currency.router)

@app.get("/")
def root():
    return {"message": "Subscription tracker API"}
