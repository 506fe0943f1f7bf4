"""
FastAPI Server Startup Script
Run this to start the Facturas API server
"""

import logging

import uvicorn

from facturas_api.config import get_settings, setup_logging
from facturas_api.network import server_address

logger = logging.getLogger("run_api_server")


def main():
    """Start the FastAPI server"""
    settings = get_settings()
    setup_logging(settings.log_level)

    address = server_address(settings.port)
    logger.info("Servidor local ejecutandose en %s", address)
    logger.info("API Documentation: %sdocs", address)
    logger.info("Health Check: %sapi/health", address)

    uvicorn.run(
        "facturas_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
