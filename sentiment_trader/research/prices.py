"""USD price lookup via CoinGecko. Optional enrichment; never blocks a decision."""

import logging

import httpx

from sentiment_trader.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

_TICKER_ID_MAP: dict[str, str] = {
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "SOL": "solana",
    "USDC": "usd-coin",
}


def coingecko_id(token: str) -> str:
    upper = token.upper().strip("$#")
    return _TICKER_ID_MAP.get(upper, upper.lower())


async def get_price_usd(
    token: str,
    cfg: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> float:
    """Current USD price, or the configured fallback on any failure."""
    cfg = cfg or default_settings
    coin_id = coingecko_id(token)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=10) as owned:
                data = await _fetch_simple_price(owned, cfg.coingecko_base_url, coin_id)
        else:
            data = await _fetch_simple_price(client, cfg.coingecko_base_url, coin_id)
        price = data.get(coin_id, {}).get("usd")
        if price is None:
            raise ValueError(f"no USD price for {coin_id}")
        return float(price)
    except (httpx.HTTPError, ValueError, TypeError, AttributeError) as exc:
        logger.error("Price fetch failed for %s, using fallback %.2f: %s", token, cfg.price_fallback_usd, exc)
        return cfg.price_fallback_usd


async def _fetch_simple_price(client: httpx.AsyncClient, base_url: str, coin_id: str) -> dict:
    resp = await client.get(
        f"{base_url}/simple/price",
        params={"ids": coin_id, "vs_currencies": "usd"},
    )
    resp.raise_for_status()
    return resp.json()
