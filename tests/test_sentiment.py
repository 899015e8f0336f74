import unittest
from autoreply.sentiment import Sentiment, SentimentTagger

class TestSentimentTagger(unittest.TestCase):

    def setUp(self):
        self.tagger = SentimentTagger()

    def test_negative_takes_precedence(self):
        self.assertEqual(self.tagger.tag("this is bad but thanks"), Sentiment.NEGATIVE)

    def test_positive(self):
        self.assertEqual(self.tagger.tag("Great service, THANK you"), Sentiment.POSITIVE)

    def test_neutral(self):
        self.assertEqual(self.tagger.tag(""), Sentiment.NEUTRAL)
        self.assertEqual(self.tagger.tag(None), Sentiment.NEUTRAL)
        self.assertEqual(self.tagger.tag("where are you located"), Sentiment.NEUTRAL)

    def test_cancel_is_negative(self):
        self.assertEqual(self.tagger.tag("please CANCEL my order"), Sentiment.NEGATIVE)

    def test_custom_keywords(self):
        tagger = SentimentTagger(negative=["awful"], positive=["lovely"])
        self.assertEqual(tagger.tag("lovely, not awful"), Sentiment.NEGATIVE)
        self.assertEqual(tagger.tag("this is bad"), Sentiment.NEUTRAL)

    def test_label_value(self):
        self.assertEqual(Sentiment.POSITIVE.value, "positive")

if __name__ == "__main__":
    unittest.main()
