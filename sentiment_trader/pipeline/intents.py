"""Intent detection for incoming chat messages."""

import re

_COIN_RE = re.compile(r"\b(eth|btc|sol|usdc|ethereum|bitcoin|solana)\b", re.IGNORECASE)
_CRYPTO_MENTION_RE = re.compile(r"\$?ETH|USDC|SOL|BTC|bitcoin|ethereum|solana", re.IGNORECASE)
_SLANG_RE = re.compile(r"\$|moon|pump|dump|bull|bear|hodl|fomo|fud", re.IGNORECASE)

_TWEET_RES = (
    re.compile(r"\b(tweets?|twitter|social)\b.*\b(eth|btc|sol|usdc|coin|crypto)\b", re.IGNORECASE),
    re.compile(r"\b(fetch|get|analyze)\b.*\b(tweets?|twitter)\b", re.IGNORECASE),
)
_ALPHA_RES = (
    re.compile(r"\b(alpha|signal|opportunity)\b.*\b(detect|find|analyze)\b", re.IGNORECASE),
    re.compile(r"\b(find|detect|analyze)\b.*\b(alpha|signals?|opportunit(?:y|ies))\b", re.IGNORECASE),
    re.compile(r"\b(trading|investment)\b.*\b(signal|alpha)\b", re.IGNORECASE),
)
_EXECUTE_RE = re.compile(r"\b(execute|run|do)\b.*\b(trade|buy|sell)\b", re.IGNORECASE)


def extract_coin(text: str, default: str = "ethereum") -> str:
    match = _COIN_RE.search(text or "")
    return match.group(1).lower() if match else default


def is_discord(source: str) -> bool:
    return "discord" in (source or "").lower()


def is_trade_request(text: str, source: str = "") -> bool:
    has_crypto = bool(_CRYPTO_MENTION_RE.search(text or ""))
    # Discord chatter is looser, slang alone is enough
    if is_discord(source):
        return has_crypto or bool(_SLANG_RE.search(text or ""))
    return has_crypto


def is_tweet_request(text: str) -> bool:
    return any(r.search(text or "") for r in _TWEET_RES)


def is_alpha_request(text: str) -> bool:
    return any(r.search(text or "") for r in _ALPHA_RES)


def is_execute_request(text: str) -> bool:
    return bool(_EXECUTE_RE.search(text or ""))
