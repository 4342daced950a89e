"""
CONFIGURATION MODULE
====================

PURPOSE:
  Central place for the Grok Chat backend settings: the xAI API key, the fixed
  completion parameters, session lifetime and password hashing cost.

WHAT THIS FILE DOES:
  - Loads environment variables from .env (so the API key stays out of code).
  - Exposes XAI_API_KEY and the fixed model parameters used by the chat relay.
  - Defines how long a session lives after it is extended (SESSION_TTL_DAYS).
  - Defines the bcrypt cost factor used when a credential is created.

USAGE:
  Import what you need: `from config import XAI_API_KEY, XAI_MODEL`
  All services import from here so behaviour is consistent.
"""

import os
from dotenv import load_dotenv


# -----------------------------------------------------------------------------
# ENVIRONMENT
# -----------------------------------------------------------------------------
# Load environment variables from .env file (if it exists).
load_dotenv()

# ============================================================================
# XAI API CONFIGURATION
# ============================================================================
# xAI serves the Grok models behind an OpenAI-style chat completions endpoint.
# Only the key comes from the environment; the model parameters are fixed so
# every request is sent with the same settings.

XAI_API_KEY = os.getenv("XAI_API_KEY", "").strip()
XAI_API_URL = "https://api.x.ai/v1/chat/completions"
XAI_MODEL = "grok-3"
XAI_TEMPERATURE = 0.7
XAI_MAX_TOKENS = 1024

# Seconds to wait for the upstream API before giving up on a request.
XAI_TIMEOUT = float(os.getenv("XAI_TIMEOUT", "60"))

# ============================================================================
# DATA STORE CONFIGURATION
# ============================================================================
# extend_session() pushes expires_at this many days into the future.
SESSION_TTL_DAYS = 30

# bcrypt cost factor (log2 rounds). 10 matches what the web client used;
# lower it in tests with BCRYPT_ROUNDS=4 to keep hashing fast.
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# ============================================================================
# SERVER
# ============================================================================
ASSISTANT_NAME = (os.getenv("ASSISTANT_NAME", "").strip() or "Grok")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
