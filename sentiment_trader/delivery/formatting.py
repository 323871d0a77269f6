"""Human-readable summaries for the decision consumer (Markdown-ish, chat friendly)."""

from collections import Counter

from sentiment_trader.pipeline.intents import is_discord
from sentiment_trader.pipeline.models import BatchItemResult, BatchReport
from sentiment_trader.scoring.models import AlphaSummary, ScoredItem
from sentiment_trader.trading.models import ExecutionResult, TradePlan


def fmt_amount(plan: TradePlan) -> str:
    return f"{plan.amount:g} {plan.base_asset}"


def fmt_price(plan: TradePlan) -> str:
    return f"{plan.price_threshold:g} USD"


def format_trade_plan(plan: TradePlan, source: str = "") -> str:
    if is_discord(source):
        return (
            "**Trading Signal Detected!**\n\n"
            f"**Action:** {plan.action.upper()}\n"
            f"**Pair:** {plan.pair}\n"
            f"**Amount:** {fmt_amount(plan)}\n"
            f"**Target:** {fmt_price(plan)}\n"
            f"**Sentiment Score:** {plan.sentiment_score:.2f}\n\n"
            "*Remember: This is analysis only, not financial advice.*\n\n"
            '*To execute this trade, reply with: "execute trade"*'
        )
    return (
        f"Trade plan generated: {plan.action.upper()} {fmt_amount(plan)} {plan.pair} "
        f"at {fmt_price(plan)} (sentiment: {plan.sentiment_score:.2f})"
    )


def format_no_signal(source: str = "") -> str:
    if is_discord(source):
        return "No strong trading signal detected in this message."
    return "No strong trade signal found."


def format_unavailable() -> str:
    return "Could not analyze this message: no sentiment provider is available right now."


# ── Batch ──


def format_batch_start(count: int, source: str = "") -> str:
    if is_discord(source):
        return f"**Starting analysis of {count} messages...**"
    return f"Starting analysis of {count} posts..."


def format_batch_signal(number: int, result: BatchItemResult, source: str = "") -> str:
    plan = result.trade_plan
    body = f"{plan.action.upper()} {plan.pair} (sentiment: {plan.sentiment_score:.2f})"
    if is_discord(source):
        return f"**Strong Signal #{number}:** {body}"
    return f"Strong signal #{number}: {body}"


def format_batch_summary(report: BatchReport, source: str = "") -> str:
    errors = sum(1 for r in report.results if r.status == "error")
    if is_discord(source):
        text = (
            "**Analysis Complete!**\n\n"
            f"**Processed:** {report.total_posts} messages\n"
            f"**Strong Signals:** {report.strong_signals}\n"
        )
        if errors:
            text += f"**Errors:** {errors}\n"
        if report.unavailable:
            text += f"**Not Analyzed:** {report.unavailable}\n"
        verdict = "Trading opportunities detected!" if report.strong_signals else "No strong signals found."
        return f"{text}\n{verdict}"

    text = (
        f"Analysis complete! Processed {report.total_posts} posts, "
        f"found {report.strong_signals} strong signals."
    )
    if errors:
        text += f" {errors} posts could not be analyzed."
    if report.unavailable:
        text += f" {report.unavailable} posts skipped: no sentiment provider available."
    return text


# ── Tweets / alpha ──


def top_keywords(items: list[ScoredItem], limit: int = 5) -> list[str]:
    counts = Counter(k for item in items for k in item.keywords)
    return [k for k, _ in counts.most_common(limit)]


def overall_sentiment(items: list[ScoredItem]) -> str:
    bullish = sum(1 for i in items if i.sentiment_label == "bullish")
    bearish = sum(1 for i in items if i.sentiment_label == "bearish")
    if bullish > bearish:
        return "Bullish"
    if bearish > bullish:
        return "Bearish"
    return "Neutral"


def format_tweet_analysis(coin: str, items: list[ScoredItem], summary: AlphaSummary) -> str:
    bullish = sum(1 for i in items if i.sentiment_label == "bullish")
    bearish = sum(1 for i in items if i.sentiment_label == "bearish")
    neutral = len(items) - bullish - bearish
    keywords = ", ".join(top_keywords(items)) or "—"

    return (
        f"**Twitter Sentiment Analysis for {coin.upper()}**\n\n"
        f"**Tweets Analyzed:** {len(items)}\n"
        f"**Overall Sentiment:** {overall_sentiment(items)}\n"
        f"**Sentiment Breakdown:** Bullish: {bullish}, Bearish: {bearish}, Neutral: {neutral}\n"
        f"**Alpha Signals:** {summary.total_alpha_signals} signals detected\n"
        f"**High-Confidence Alphas:** {summary.high_confidence_alphas}\n"
        f"**Top Keywords:** {keywords}\n\n"
        "*Analysis based on recent Twitter activity.*"
    )


def format_alpha_analysis(coin: str, summary: AlphaSummary) -> str:
    header = f"**Alpha Signal Analysis for {coin.upper()}**\n\n"
    if summary.total_alpha_signals == 0:
        return (
            header
            + "**No significant alpha signals detected**\n\n"
            + "*Consider monitoring for longer periods or different keywords.*"
        )

    risk = summary.risk_distribution
    impact = summary.impact_distribution
    signals = ", ".join(s.signal for s in summary.top_alpha_signals[:5]) or "—"
    return (
        header
        + f"**High-Confidence Alphas:** {summary.high_confidence_alphas} signals\n"
        + f"**Average Alpha Score:** {summary.average_alpha_score:.1f}\n"
        + f"**Risk Distribution:** Low: {risk.low}, Medium: {risk.medium}, High: {risk.high}\n"
        + f"**Impact Distribution:** Low: {impact.low}, Medium: {impact.medium}, High: {impact.high}\n"
        + f"**Top Alpha Signals:** {signals}\n\n"
        + "*Alpha signals detected from social media analysis.*"
    )


def format_analysis_failed(title: str, error: str) -> str:
    return f"**{title}**\n\nError: {error}"


def format_no_tweets(coin: str) -> str:
    return f"**No Tweets Found**\n\nNo recent tweets found for {coin.upper()}."


def format_alpha_failed(coin: str) -> str:
    return f"**Alpha Analysis Failed**\n\nNo tweets found for {coin.upper()} or API error occurred."


# ── Execution ──


def format_execution(result: ExecutionResult) -> str:
    plan = result.plan
    if not result.success:
        return f"**Trade Execution Failed**\n\nError: {result.error or 'unknown error'}"

    received = f"{result.amount_received:g} {plan.quote_asset}" if result.amount_received is not None else "N/A"
    return (
        "**Trade Executed Successfully!**\n\n"
        f"**Action:** {plan.action.upper()}\n"
        f"**Pair:** {plan.pair}\n"
        f"**Amount:** {fmt_amount(plan)}\n"
        f"**Received:** {received}\n"
        f"**Transaction Hash:** {result.transaction_hash}\n"
        f"**Sentiment Score:** {plan.sentiment_score:.2f}\n\n"
        "*Trade executed based on sentiment analysis.*"
    )
