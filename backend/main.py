"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI

from doordont import __version__
from doordont.core.dependencies import get_evaluation_scheduler
from doordont.routes import goals, health, users

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    scheduler = get_evaluation_scheduler()

    # Startup
    try:
        scheduler.start()
        logger.info("✓ Goal evaluation scheduler started")
    except Exception as e:
        logger.warning(f"Could not start scheduler: {e}")

    try:
        restored = scheduler.restore_jobs()
        logger.info(f"✓ Restored {restored} goal evaluation(s)")
    except Exception as e:
        logger.warning(f"Could not restore goal evaluations: {e}")

    yield

    # Shutdown
    try:
        scheduler.shutdown()
        logger.info("✓ Goal evaluation scheduler stopped")
    except Exception as e:
        logger.warning(f"Error stopping scheduler: {e}")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="DoOrDont API",
    version=__version__,
    lifespan=lifespan
)

# Register routes
app.include_router(health.router)
app.include_router(users.router)
app.include_router(goals.router)
