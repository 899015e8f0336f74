import pytest
from unittest.mock import patch, MagicMock
from twilio.base.exceptions import TwilioRestException

from autoreply.errors import TransportError
from autoreply.transport import TwilioTransport

FROM = "whatsapp:+14155238886"


@pytest.mark.asyncio
@patch("autoreply.transport.Client")
async def test_twilio_message_sending(mock_twilio_client):
    """Test Twilio message sending"""
    mock_twilio = MagicMock()
    mock_twilio.messages.create.return_value = MagicMock(sid="SM123")
    mock_twilio_client.return_value = mock_twilio

    transport = TwilioTransport("AC123", "token", FROM)
    sent = await transport.send("whatsapp:+1234567890", "Hello!")

    assert sent is True
    mock_twilio_client.assert_called_once_with("AC123", "token")
    mock_twilio.messages.create.assert_called_once_with(
        body="Hello!",
        from_=FROM,
        to="whatsapp:+1234567890",
    )


@pytest.mark.asyncio
@patch("autoreply.transport.Client")
async def test_twilio_missing_credentials_is_noop(mock_twilio_client):
    transport = TwilioTransport(None, None, None)

    assert transport.configured is False
    assert await transport.send("whatsapp:+1234567890", "Hello!") is False
    mock_twilio_client.assert_not_called()


@pytest.mark.asyncio
@patch("autoreply.transport.Client")
async def test_twilio_error_raises_transport_error(mock_twilio_client):
    mock_twilio = MagicMock()
    mock_twilio.messages.create.side_effect = TwilioRestException(400, "/Messages", "invalid number")
    mock_twilio_client.return_value = mock_twilio

    transport = TwilioTransport("AC123", "token", FROM)
    with pytest.raises(TransportError):
        await transport.send("whatsapp:+0", "Hello!")


@pytest.mark.asyncio
@patch("autoreply.transport.Client")
async def test_twilio_network_error_raises_transport_error(mock_twilio_client):
    mock_twilio = MagicMock()
    mock_twilio.messages.create.side_effect = ConnectionError("unreachable")
    mock_twilio_client.return_value = mock_twilio

    transport = TwilioTransport("AC123", "token", FROM)
    with pytest.raises(TransportError):
        await transport.send("whatsapp:+1", "Hello!")
