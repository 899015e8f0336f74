import unittest
from unittest.mock import patch
from config import Config

class TestEnvironmentValidation(unittest.TestCase):
    @patch.dict('os.environ', {}, clear=True)
    def test_missing_credentials_only_warn(self):
        """Missing Twilio/OpenAI credentials must not stop startup"""
        with self.assertLogs(level="WARNING") as logs:
            config = Config()
        self.assertFalse(config.twilio_configured())
        self.assertFalse(config.openai_configured())
        self.assertTrue(any("TWILIO credentials missing" in line for line in logs.output))
        self.assertTrue(any("OPENAI_API_KEY missing" in line for line in logs.output))

    @patch.dict('os.environ', {'TWILIO_ACCOUNT_SID': 'test_sid', 'TWILIO_AUTH_TOKEN': 'test_token'}, clear=True)
    def test_missing_whatsapp_sender(self):
        """Twilio needs a sender number before it counts as configured"""
        config = Config()
        self.assertFalse(config.twilio_configured())

    @patch.dict('os.environ', {
        'TWILIO_ACCOUNT_SID': 'test_sid',
        'TWILIO_AUTH_TOKEN': 'test_token',
        'TWILIO_WHATSAPP_FROM': 'whatsapp:+14155238886',
        'OPENAI_API_KEY': 'sk-test',
    }, clear=True)
    def test_valid_environment(self):
        """Test valid environment variables"""
        config = Config()
        self.assertTrue(config.twilio_configured())
        self.assertTrue(config.openai_configured())

    @patch.dict('os.environ', {}, clear=True)
    def test_defaults(self):
        config = Config()
        self.assertEqual(config.BUSINESS_NAME, "Local Business")
        self.assertEqual(config.BUSINESS_WEBSITE_URL, "https://example.com")
        self.assertEqual(config.OPENAI["model"], "gpt-4o-mini")
        self.assertEqual(config.OPENAI["max_tokens"], 150)
        self.assertEqual(config.APP["port"], 4000)
        self.assertEqual(config.APP["cors_origins"], ["*"])

    @patch.dict('os.environ', {'BUSINESS_NAME': 'Sunny Salon', 'CORS_ORIGINS': 'http://a.test, http://b.test'}, clear=True)
    def test_overrides(self):
        config = Config()
        self.assertEqual(config.BUSINESS_NAME, "Sunny Salon")
        self.assertEqual(config.APP["cors_origins"], ["http://a.test", "http://b.test"])

if __name__ == "__main__":
    unittest.main()
