#!/usr/bin/env python3
"""
Timecard Excel Service
Main execution script - run this file to start the HTTP server
"""

import logging
import sys
from pathlib import Path

# Add current directory to Python path
sys.path.insert(0, str(Path(__file__).parent))

import uvicorn

from timecard.main import create_app
from timecard.services.config_service import ConfigService

logger = logging.getLogger("timecard.run")


def main():
    """Main entry point for the timecard service"""
    config = ConfigService()
    port = config.port

    app = create_app(config)
    logger.info("listening on :%s", port)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        reload=False,
        access_log=True,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
