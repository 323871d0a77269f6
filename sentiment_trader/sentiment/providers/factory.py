"""Build the ordered sentiment provider chain from config."""

import logging

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.sentiment.providers.base import SentimentProvider

logger = logging.getLogger(__name__)


def create_provider(name: str, cfg: Settings) -> SentimentProvider | None:
    if name == "gemini":
        from sentiment_trader.sentiment.providers.gemini import GeminiProvider
        return GeminiProvider(cfg.gemini_api_key, cfg.gemini_model)
    if name == "openai":
        from sentiment_trader.sentiment.providers.openai_compatible import OpenAIProvider
        return OpenAIProvider(cfg.openai_api_key, cfg.openai_model, cfg.openai_base_url)
    if name == "anthropic":
        from sentiment_trader.sentiment.providers.claude import AnthropicProvider
        return AnthropicProvider(cfg.anthropic_api_key, cfg.llm_model)
    if name == "vader":
        from sentiment_trader.sentiment.providers.vader import VaderProvider
        return VaderProvider()

    logger.warning("Unknown sentiment provider %r — ignoring", name)
    return None


def create_providers(cfg: Settings | None = None) -> list[SentimentProvider]:
    """Providers in configured order; unconfigured ones are kept and skipped at call time."""
    cfg = cfg or default_settings
    providers = []
    for name in cfg.provider_names:
        provider = create_provider(name, cfg)
        if provider is not None:
            providers.append(provider)

    configured = [p.name for p in providers if p.is_configured()]
    if configured:
        logger.info("Sentiment providers: %s", " -> ".join(configured))
    else:
        logger.warning("No sentiment provider configured — every classification will be unavailable")
    return providers
