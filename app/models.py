"""
DATA MODELS MODULE
==================

This file defines the Pydantic models used by the data store and the API.
The store keeps these objects in its in-memory collections and mutates them
in place (e.g. extend_session() rewrites expires_at on the stored Session).

MODELS:
  User          - Public view of an account (no credential).
  AuthUser      - Full account record including the bcrypt password hash.
  Session       - Login session owned by a user; expires_at is stored, not enforced.
  Chat          - Conversation owned by a user, public or private.
  Message       - One message inside a chat. Order in the store defines chronology.
  Vote          - Up/down vote on a message; one per message per chat.
  Suggestion    - Edit suggestion attached to a document.
  ChatRequest   - Body of POST /api/chat.
  ChatResponse  - Body returned by POST /api/chat on success.
  ErrorResponse - Body returned by POST /api/chat on failure.
"""

import uuid
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.utils.time_info import utc_now


def new_id() -> str:
    """Return a fresh random identifier (UUID4 string)."""
    return str(uuid.uuid4())


# ==============================================================================
# STORE ENTITIES
# ==============================================================================

class User(BaseModel):
    id: str
    email: str
    created_at: datetime = Field(default_factory=utc_now)


class AuthUser(User):
    """
    Credential record. Only ever handed to authentication code; everything
    else receives the User view produced by to_public().
    """
    password: str   # bcrypt hash, never the plaintext

    def to_public(self) -> User:
        return User(id=self.id, email=self.email, created_at=self.created_at)


class Session(BaseModel):
    id: str
    user_id: str
    expires_at: datetime


class Chat(BaseModel):
    id: str
    user_id: str
    title: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    visibility: Literal["public", "private"] = "private"


class Message(BaseModel):
    id: str = Field(default_factory=new_id)
    chat_id: str
    role: Literal["user", "assistant"]
    content: str
    created_at: datetime = Field(default_factory=utc_now)


class Vote(BaseModel):
    id: str = Field(default_factory=new_id)
    chat_id: str
    message_id: str
    user_id: str = ""
    value: Literal[1, -1]
    created_at: datetime = Field(default_factory=utc_now)


class Suggestion(BaseModel):
    id: str = Field(default_factory=new_id)
    document_id: str
    content: str
    created_at: datetime = Field(default_factory=utc_now)


# ==============================================================================
# API REQUEST/RESPONSE MODELS
# ==============================================================================

class ChatRequest(BaseModel):
    """
    Request body for POST /api/chat.

    message is optional at the schema level: a missing or empty message is
    answered with 400 by the endpoint itself rather than with FastAPI's 422.
    """
    message: Optional[str] = None


class ChatResponse(BaseModel):
    """Response body for POST /api/chat: the assistant's reply text."""
    response: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
