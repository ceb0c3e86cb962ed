#!/usr/bin/env python3
"""
Interview Scheduler Server: entrypoint for python -m scheduler.server.

For uvicorn directly use scheduler.app:app.
"""

from .app import app

if __name__ == "__main__":
    import uvicorn
    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
