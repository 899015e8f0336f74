import os
import sys
import tempfile

import pytest
from unittest.mock import AsyncMock, MagicMock

# Add the project root directory to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Keep tests offline: no real credentials, logs in a scratch directory.
for _key in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_WHATSAPP_FROM",
             "OPENAI_API_KEY", "NGROK_AUTH_TOKEN", "INTENTS_FILE"):
    os.environ.pop(_key, None)
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="autoreply-logs-"))

from autoreply.intent_store import IntentStore
from autoreply.message_log import MessageLog


@pytest.fixture
def intent_store():
    return IntentStore()


@pytest.fixture
def message_log():
    return MessageLog()


@pytest.fixture
def ai_client():
    """Stand-in for OpenAIResponder that records calls."""
    client = MagicMock()
    client.configured = True
    client.complete = AsyncMock(return_value="AI says hi")
    return client


@pytest.fixture
def transport():
    """Stand-in for TwilioTransport that records sends."""
    sender = MagicMock()
    sender.configured = True
    sender.send = AsyncMock(return_value=True)
    return sender
