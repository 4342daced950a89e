"""
CHAT STORE MODULE
=================

In-memory data access layer for the chat backend. One ChatStore instance owns
every collection and is created once at startup (see app.main lifespan); route
handlers and services receive it by reference. Nothing is written to disk:
all state is lost when the process exits.

COLLECTIONS:
  users        - email -> AuthUser
  sessions     - session id -> Session
  chats        - chat id -> Chat
  messages     - chat id -> [Message, ...]      (insertion order)
  votes        - chat id -> [Vote, ...]         (at most one per message id)
  suggestions  - document id -> [Suggestion, ...]

ERRORS:
  Every failure is raised as DbInternalError with the original exception as
  its cause (NotFoundError for missing users, sessions, chats and messages).

CONCURRENCY:
  Not thread-safe. Mutations are plain dict/list updates with no locking, and
  multi-step operations such as the cascade in delete_chat_by_id are not atomic.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Literal, Tuple

from app.errors import DbInternalError, InvalidCredentialsError, NotFoundError
from app.models import AuthUser, Chat, Message, Session, Suggestion, User, Vote, new_id
from app.utils.passwords import check_password, hash_password
from app.utils.time_info import days_from_now, utc_now
from config import SESSION_TTL_DAYS

logger = logging.getLogger("GROK.CHAT")

_VOTE_VALUES = {"up": 1, "down": -1}


def _not_found(what: str) -> DbInternalError:
    return DbInternalError(NotFoundError(f"{what} not found"))


class ChatStore:
    """Owns the in-memory collections and exposes the CRUD operations over them."""

    def __init__(self):
        self.users: Dict[str, AuthUser] = {}
        self.sessions: Dict[str, Session] = {}
        self.chats: Dict[str, Chat] = {}
        self.messages: Dict[str, List[Message]] = {}
        self.votes: Dict[str, List[Vote]] = {}
        self.suggestions: Dict[str, List[Suggestion]] = {}

    # ------------------------------------------------------------------------------
    # USERS
    # ------------------------------------------------------------------------------

    def get_auth_user(self, email: str) -> AuthUser:
        user = self.users.get(email)
        if user is None:
            raise _not_found("User")
        return user

    def get_user(self, email: str) -> User:
        """Same lookup as get_auth_user() but returns the public view (no password hash)."""
        return self.get_auth_user(email).to_public()

    def create_auth_user(self, email: str, password: str) -> AuthUser:
        """
        Hash the password and store a new credential record under `email`.
        An existing record for the same email is replaced.
        """
        if email in self.users:
            logger.warning("Overwriting existing credential for %s", email)
        try:
            hashed = hash_password(password)
        except ValueError as e:
            raise DbInternalError(e) from e
        user = AuthUser(id=new_id(), email=email, password=hashed)
        self.users[email] = user
        return user

    def verify_credentials(self, email: str, password: str) -> User:
        """Return the public user if `password` matches the stored hash for `email`."""
        user = self.get_auth_user(email)
        try:
            matches = check_password(password, user.password)
        except ValueError as e:
            raise DbInternalError(e) from e
        if not matches:
            raise DbInternalError(InvalidCredentialsError("Invalid credentials"))
        return user.to_public()

    def _find_user_by_id(self, user_id: str) -> AuthUser:
        for user in self.users.values():
            if user.id == user_id:
                return user
        raise _not_found("User")

    # ------------------------------------------------------------------------------
    # SESSIONS
    # ------------------------------------------------------------------------------

    def create_session(self, session: Session) -> Session:
        self.sessions[session.id] = session
        return session

    def get_full_session(self, session_id: str) -> Tuple[Session, User]:
        """Return the session together with the public view of the user who owns it."""
        session = self.sessions.get(session_id)
        if session is None:
            raise _not_found("Session")
        user = self._find_user_by_id(session.user_id)
        return session, user.to_public()

    def delete_session(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)

    def extend_session(self, session_id: str) -> Session:
        session = self.sessions.get(session_id)
        if session is None:
            raise _not_found("Session")
        session.expires_at = days_from_now(SESSION_TTL_DAYS)
        return session

    def delete_sessions_for_user(self, user_id: str) -> None:
        for session_id in [s.id for s in self.sessions.values() if s.user_id == user_id]:
            del self.sessions[session_id]

    # ------------------------------------------------------------------------------
    # CHATS
    # ------------------------------------------------------------------------------

    def save_chat(self, id: str, user_id: str, title: str) -> Chat:
        chat = Chat(id=id, user_id=user_id, title=title)
        self.chats[id] = chat
        return chat

    def delete_chat_by_id(self, id: str) -> None:
        """Remove the chat and, with it, every message and vote recorded for it."""
        self.chats.pop(id, None)
        self.messages.pop(id, None)
        self.votes.pop(id, None)

    def get_chats_by_user_id(self, id: str) -> List[Chat]:
        return [chat for chat in self.chats.values() if chat.user_id == id]

    def get_chat_by_id(self, id: str) -> Chat:
        chat = self.chats.get(id)
        if chat is None:
            raise _not_found("Chat")
        return chat

    def update_chat_visibility_by_id(self, chat_id: str, visibility: Literal["public", "private"]) -> None:
        chat = self.get_chat_by_id(chat_id)
        chat.visibility = visibility
        chat.updated_at = utc_now()

    # ------------------------------------------------------------------------------
    # MESSAGES
    # ------------------------------------------------------------------------------

    def save_messages(self, messages: List[Message]) -> None:
        for message in messages:
            self.messages.setdefault(message.chat_id, []).append(message)

    def get_messages_by_chat_id(self, id: str) -> List[Message]:
        return self.messages.get(id, [])

    def get_message_by_id(self, id: str) -> Message:
        for chat_messages in self.messages.values():
            for message in chat_messages:
                if message.id == id:
                    return message
        raise _not_found("Message")

    def delete_messages_by_chat_id_after_timestamp(self, chat_id: str, timestamp: datetime) -> None:
        """
        Keep only the messages created strictly before `timestamp`.
        A naive timestamp is taken to be UTC, matching the stored created_at values.
        """
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        chat_messages = self.messages.get(chat_id, [])
        self.messages[chat_id] = [m for m in chat_messages if m.created_at < timestamp]

    def delete_trailing_messages(self, id: str) -> None:
        """
        Drop the most recent user message and everything after it, so the
        exchange can be regenerated. Chats without a user message are left alone.
        """
        chat_messages = self.messages.get(id, [])
        for index in range(len(chat_messages) - 1, -1, -1):
            if chat_messages[index].role == "user":
                self.messages[id] = chat_messages[:index]
                return

    # ------------------------------------------------------------------------------
    # VOTES
    # ------------------------------------------------------------------------------

    def vote_message(
        self,
        chat_id: str,
        message_id: str,
        vote_type: Literal["up", "down"],
        user_id: str = "",
    ) -> None:
        """
        Record an up/down vote for a message. Voting again on the same message
        overwrites the value of the existing record instead of adding one.
        """
        if vote_type not in _VOTE_VALUES:
            raise DbInternalError(ValueError(f"Invalid vote type: {vote_type!r}"))
        value = _VOTE_VALUES[vote_type]
        chat_votes = self.votes.setdefault(chat_id, [])
        for vote in chat_votes:
            if vote.message_id == message_id:
                vote.value = value
                return
        chat_votes.append(Vote(chat_id=chat_id, message_id=message_id, user_id=user_id, value=value))

    def get_votes_by_chat_id(self, id: str) -> List[Vote]:
        return self.votes.get(id, [])

    # ------------------------------------------------------------------------------
    # SUGGESTIONS
    # ------------------------------------------------------------------------------

    def save_suggestions(self, suggestions: List[Suggestion]) -> List[Suggestion]:
        for suggestion in suggestions:
            self.suggestions.setdefault(suggestion.document_id, []).append(suggestion)
        return suggestions

    def get_suggestions_by_document_id(self, document_id: str) -> List[Suggestion]:
        return self.suggestions.get(document_id, [])
