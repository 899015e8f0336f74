# admin/routes.py

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from config import config
from autoreply import shared
from autoreply.errors import TransportError, ValidationError
from logging_config import configure_logger

logger = configure_logger("admin_routes")
router = APIRouter(prefix="/api")


async def _json_body(req: Request) -> dict:
    try:
        data = await req.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


@router.get("/config")
async def get_config():
    """Business details, current intents and the recent log window."""
    return {
        "businessName": config.BUSINESS_NAME,
        "website": config.BUSINESS_WEBSITE_URL,
        "intents": [i.model_dump() for i in shared.intent_store.list()],
        "logs": [e.to_dict() for e in shared.message_log.recent(config.APP["log_window"])],
    }


@router.post("/config/intents")
async def replace_intents(req: Request):
    data = await _json_body(req)
    try:
        intents = shared.intent_store.replace_all(data.get("intents"))
    except ValidationError as e:
        logger.warning("Rejected intents update: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})
    return {"success": True, "intents": [i.model_dump() for i in intents]}


@router.get("/logs")
async def get_logs():
    return [e.to_dict() for e in shared.message_log.all()]


@router.post("/preview")
async def preview(req: Request):
    """Classify a message the way the webhook would, without calling OpenAI or logging."""
    data = await _json_body(req)
    message = data.get("message")
    intent = shared.reply_generator.classifier.classify(message)
    if intent is not None:
        return {"intent": intent.name, "reply": intent.reply}
    return {"intent": None, "sentiment": shared.reply_generator.tagger.tag(message).value}


@router.post("/send_test")
async def send_test(req: Request):
    """Send an operator-composed message straight through the transport."""
    data = await _json_body(req)
    to = data.get("to")
    message = data.get("message")
    if not to or not message:
        return JSONResponse(status_code=400, content={"error": "to and message required"})

    try:
        dispatched = await shared.transport.send(to, message)
    except TransportError as e:
        logger.error("Twilio send error: %s", e)
        dispatched = False
    return {"success": True, "dispatched": dispatched}
