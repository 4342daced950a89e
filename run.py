"""
RUN SCRIPT - Start the Grok Chat server
=======================================

PURPOSE:
  Single entry point to start the backend.

WHAT IT DOES:
  - Imports the FastAPI app from app.main.
  - Runs it with uvicorn on HOST/PORT from config (default 0.0.0.0:8000).
  - reload=True means any change to Python files will restart the server (handy for development).

USAGE:
  python run.py

  API docs: http://localhost:8000/docs

NOTE:
  Before running, set XAI_API_KEY in .env. Without it POST /api/chat answers
  500 "API key not configured". All chat data lives in memory and is lost on restart.
"""

import uvicorn

from config import HOST, PORT

# ------------------------------------------------------------------------------
# ENTRY POINT
# ------------------------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",   # String path to the FastAPI app instance (module:variable).
        host=HOST,
        port=PORT,
        reload=True
    )
