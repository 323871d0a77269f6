from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Sentiment oracles, tried left to right: gemini | openai | anthropic | vader
    sentiment_providers: str = "gemini,openai"
    oracle_timeout_seconds: float = 20.0

    # Gemini (primary)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    # OpenAI (fallback); base_url points at any OpenAI-compatible endpoint
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = ""

    # Anthropic (optional, blank disables)
    anthropic_api_key: str = ""
    llm_model: str = "claude-sonnet-4-5-20250929"

    # Trade decision policy (static, not derived from live prices)
    signal_threshold: float = 0.5
    trade_pair: str = "ETH/USDC"
    trade_amount: float = 0.1  # in base asset
    buy_price_threshold_usd: float = 3000.0
    sell_price_threshold_usd: float = 3500.0
    supported_tokens: str = "ETH,USDC,SOL,BTC"

    # Alpha detection
    alpha_min_score: float = 5.0
    alpha_top_n: int = 10

    # Tweet analysis
    tweet_report_limit: int = 10  # tweets scored for a sentiment report
    alpha_tweet_limit: int = 15  # tweets scored for alpha analysis
    tweet_fetch_count: int = 15

    # Twikit credentials (free scraper)
    twitter_username: str = ""
    twitter_email: str = ""
    twitter_password: str = ""
    twikit_cookies_file: str = "twikit_cookies.json"
    capsolver_api_key: str = ""  # capsolver.com API key (for Cloudflare bypass)

    # Telegram Bot (decision consumer)
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""

    # Price lookup
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    price_fallback_usd: float = 3000.0
    price_enrichment: bool = False  # attach live base-asset price to trade plan replies

    # Execution
    trade_cooldown_seconds: int = 30  # prevent re-trading a pair within N seconds

    # Web
    web_host: str = "0.0.0.0"
    web_port: int = 8888

    log_level: str = "INFO"

    @property
    def provider_names(self) -> list[str]:
        return [p.strip().lower() for p in self.sentiment_providers.split(",") if p.strip()]

    @property
    def supported_token_list(self) -> list[str]:
        return [t.strip().upper() for t in self.supported_tokens.split(",") if t.strip()]


settings = Settings()
