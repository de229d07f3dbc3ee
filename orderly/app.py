import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orderly import __version__
from orderly.modules.database import connect_to_db, disconnect_from_db, init_db
from orderly.modules.errors import register_exception_handlers
from orderly.modules.system_endpoints import router as system_router
from orderly.modules.users.api import user_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s [%(levelname)s] %(name)s :: %(message)s'
)
logger = logging.getLogger("orderly.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    await init_db()
    logger.info("Orderly started")
    yield
    # Shutdown
    await disconnect_from_db()


app = FastAPI(title="Orderly", version=__version__, lifespan=lifespan)

# CORS Configuration
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(user_router)
app.include_router(system_router)
