# run.py
"""
Main entry point for the AgriGuard reference advisory service
"""

import uvicorn
import logging
from contextlib import asynccontextmanager

from agents.assistant.agent import AssistantAgent
from api.app import create_app
from core.config import get_settings, validate_settings
from core.logging import setup_logging

# Setup logging
setup_logging(get_settings())
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app):
    """Application lifespan management"""

    # Startup
    logger.info("🚀 Starting AgriGuard advisory service")

    logger.info("Initializing agents...")
    try:
        assistant = AssistantAgent()
        app.state.assistant = assistant

        health_results = assistant.registry.health_check_all()
        for agent_name, health in health_results.items():
            status = "✅" if health["status"] == "healthy" else "❌"
            logger.info(f"{status} {agent_name}: {health['status']}")

        logger.info("🎯 All agents initialized successfully")

    except Exception as e:
        logger.error(f"❌ Failed to initialize agents: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Shutting down AgriGuard advisory service")

def create_application():
    """Create FastAPI application with all configurations"""
    return create_app(lifespan=lifespan)

def main():
    """Main entry point"""
    settings = get_settings()
    validate_settings(settings)

    logger.info(f"Starting server on {settings.api_host}:{settings.api_port}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.debug:
        # Import string so reload can re-import the factory
        uvicorn.run(
            "run:create_application",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )
    else:
        app = create_application()
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            reload=False,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )

if __name__ == "__main__":
    main()
