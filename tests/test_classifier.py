# tests/test_classifier.py

import unittest
from autoreply.classifier import IntentClassifier, normalize_text
from autoreply.intent_store import Intent, IntentStore

class TestIntentClassifier(unittest.TestCase):

    def setUp(self):
        self.store = IntentStore()
        self.classifier = IntentClassifier(self.store)

    def test_greeting_intent(self):
        self.assertEqual(self.classifier.classify("HELLO there").name, "greeting")
        self.assertEqual(self.classifier.classify("hey!").name, "greeting")

    def test_price_intent(self):
        self.assertEqual(self.classifier.classify("What are your fees?").name, "price")

    def test_appointment_intent(self):
        self.assertEqual(self.classifier.classify("I want to BOOK a table").name, "appointment")

    def test_substring_match_ignores_word_boundaries(self):
        # "hi" is found inside "this"
        self.assertEqual(self.classifier.classify("this one").name, "greeting")

    def test_no_match(self):
        self.assertIsNone(self.classifier.classify("Blah blah blah"))
        self.assertIsNone(self.classifier.classify(""))

    def test_missing_text_is_empty(self):
        self.assertIsNone(self.classifier.classify(None))
        self.assertEqual(normalize_text(None), "")

    def test_first_intent_in_store_order_wins(self):
        self.store.replace_all([
            Intent(name="first", patterns=["order"], reply="1"),
            Intent(name="second", patterns=["order status"], reply="2"),
        ])
        self.assertEqual(self.classifier.classify("what is my order status").name, "first")

        self.store.replace_all(list(reversed(self.store.list())))
        self.assertEqual(self.classifier.classify("what is my order status").name, "second")

    def test_empty_patterns_never_match(self):
        self.store.replace_all([
            Intent(name="empty", patterns=[], reply="never"),
            Intent(name="blank", patterns=["", None], reply="never"),
        ])
        self.assertIsNone(self.classifier.classify("anything at all"))
        self.assertIsNone(self.classifier.classify(""))

    def test_patterns_are_case_insensitive(self):
        self.store.replace_all([Intent(name="menu", patterns=["MeNu"], reply="m")])
        self.assertEqual(self.classifier.classify("send the menu please").name, "menu")

if __name__ == '__main__':
    unittest.main()
