#!/usr/bin/env python3
"""Start the Truss Layout Planner API server."""

import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "trusslayout.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["trusslayout"],
    )
