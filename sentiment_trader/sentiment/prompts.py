"""Instruction templates sent to the sentiment oracles."""

MESSAGE_PROMPT = """You are a crypto trading sentiment analyzer. Return only a number between -1 and 1 representing how positive or negative this message is toward {pair} trading.

-1 = very negative/bearish
0 = neutral
1 = very positive/bullish

Message: {text}

Sentiment score:"""

TWEET_PROMPT = """Analyze the sentiment of this crypto-related tweet and provide a structured response:

Tweet: "{text}"

Please respond with ONLY a JSON object in this exact format:
{{
  "sentiment": "bullish|bearish|neutral",
  "score": number (1-10, where 10 is extremely positive),
  "confidence": number (0-1, where 1 is very confident),
  "keywords": ["keyword1", "keyword2", "keyword3"]
}}

Focus on crypto trading sentiment, market sentiment, and potential price impact."""


def message_prompt(text: str, pair: str) -> str:
    return MESSAGE_PROMPT.format(text=text, pair=pair)


def tweet_prompt(text: str) -> str:
    return TWEET_PROMPT.format(text=text)
