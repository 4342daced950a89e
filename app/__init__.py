"""
GROK CHAT APPLICATION PACKAGE
=============================

FILE STRUCTURE:
  app/
    __init__.py   - This file; marks 'app' as a package.
    main.py       - FastAPI app and HTTP endpoints (/api/chat, /health).
    models.py     - Pydantic models for store entities and API bodies.
    errors.py     - Data store error types (DbInternalError + causes).
    services/     - In-memory ChatStore and the xAI relay.
    utils/        - Helpers: bcrypt password hashing, UTC timestamps.
"""
