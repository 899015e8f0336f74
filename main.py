from fastapi import FastAPI, Form, Response
from fastapi.middleware.cors import CORSMiddleware
from twilio.twiml.messaging_response import MessagingResponse
from pyngrok import ngrok, conf
from datetime import datetime
from contextlib import asynccontextmanager
import uvicorn

from config import config
from logging_config import configure_logger
from admin.homepage import router as homepage_router
from admin.routes import router as admin_router
from autoreply import shared
from autoreply.errors import InternalError

# ---------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------
logger = configure_logger("main")
logger.info("Main module initialized.")

if config.APP.get("debug"):
    logger.info("Debug mode enabled")

# ---------------------------------------------------------------------
# FastAPI App Setup
# ---------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    yield
    await shutdown()

app = FastAPI(lifespan=lifespan)
app.include_router(homepage_router)
app.include_router(admin_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.APP["cors_origins"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------
# Startup and Shutdown
# ---------------------------------------------------------------------
async def startup():
    logger.info("Starting auto-reply service for %s...", config.BUSINESS_NAME)
    config.log_configuration()
    logger.info("Loaded %d intents", len(shared.intent_store))
    if config.APP["ngrok_auth_token"]:
        await start_ngrok()

async def shutdown():
    logger.info("Gracefully shutting down auto-reply service.")
    if config.APP["ngrok_auth_token"]:
        try:
            ngrok.kill()
            logger.debug("Ngrok process killed successfully.")
        except Exception as e:
            logger.error(f"Error while shutting down Ngrok: {e}")

async def start_ngrok():
    conf.get_default().auth_token = config.APP["ngrok_auth_token"]
    try:
        public_url = ngrok.connect(config.APP["port"]).public_url
        logger.info(f"Ngrok public URL: {public_url}")
        logger.info(f"Twilio Webhook URL: {public_url}/webhook/twilio")
    except Exception as e:
        logger.error(f"Error starting Ngrok: {e}")

# ---------------------------------------------------------------------
# Webhook Endpoints
# ---------------------------------------------------------------------
@app.post("/webhook/twilio")
async def handle_webhook(
    From: str = Form(...),
    Body: str = Form(""),
):
    try:
        await shared.conversation_handler.handle_inbound(From, Body)
    except InternalError:
        return Response(content="Error", status_code=500, media_type="text/plain")
    return Response(content=str(MessagingResponse()), media_type="application/xml")

@app.get("/health")
async def health_check():
    return {
        "status": "active",
        "timestamp": datetime.now().isoformat(),
        "services": {
            "twilio": "configured" if shared.transport.configured else "unconfigured",
            "openai": "configured" if shared.ai_client.configured else "unconfigured",
        },
    }

# ---------------------------------------------------------------------
# Main Entry Point
# ---------------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=config.APP["port"],
        reload=False,
        log_level="info",
    )
