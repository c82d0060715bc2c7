#!/usr/bin/env python3

import os
import sys
import logging

# Change to the project root directory
project_root = os.path.dirname(os.path.abspath(__file__))
os.chdir(project_root)
sys.path.insert(0, project_root)

from consult.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger("run_server")

if __name__ == "__main__":
    import uvicorn
    from consult.main import app

    host = os.getenv("CONSULT_HOST", "127.0.0.1")
    port = int(os.getenv("CONSULT_PORT", "8000"))
    log.info("Starting server from %s on %s:%d", os.getcwd(), host, port)
    uvicorn.run(app, host=host, port=port, reload=False, access_log=True)
