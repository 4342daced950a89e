"""
SERVICES PACKAGE
=================

Business logic lives here. The API layer (app.main) calls these services;
they don't handle HTTP.

MODULES:
    store       - ChatStore: in-memory users, sessions, chats, messages, votes, suggestions
    xai_service - XaiService: relays a single message to the xAI chat completions API
"""
