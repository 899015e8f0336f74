from config import config
from autoreply.ai_client import OpenAIResponder
from autoreply.classifier import IntentClassifier
from autoreply.conversation_handler import ConversationHandler
from autoreply.intent_store import IntentStore, load_intents_file
from autoreply.message_log import MessageLog
from autoreply.reply_generator import ReplyGenerator
from autoreply.transport import TwilioTransport

_seed = load_intents_file(config.BUSINESS["intents_file"]) if config.BUSINESS["intents_file"] else None

intent_store = IntentStore(_seed)
message_log = MessageLog()
transport = TwilioTransport(
    config.TWILIO["account_sid"],
    config.TWILIO["auth_token"],
    config.TWILIO["whatsapp_from"],
)
ai_client = OpenAIResponder(
    config.OPENAI["api_key"],
    model=config.OPENAI["model"],
    temperature=config.OPENAI["temperature"],
    max_tokens=config.OPENAI["max_tokens"],
    timeout=config.OPENAI["timeout"],
)
reply_generator = ReplyGenerator(
    IntentClassifier(intent_store),
    ai_client,
    business_name=config.BUSINESS_NAME,
    website=config.BUSINESS_WEBSITE_URL,
)
conversation_handler = ConversationHandler(message_log, reply_generator, transport)
