# crowdcheck/model.py
import logging
from typing import Tuple

from .lexicons import (
    CREDIBILITY_INDICATORS,
    FAKE_NEWS_INDICATORS,
    FAKE_WEIGHTS,
    NEUTRAL_WEIGHTS,
    SUPPORTING_WEIGHTS,
    count_hits,
    weighted_hits,
)
from .models import ContentType, SentimentVerdict, labels_for
from .ollama import OllamaClient

logger = logging.getLogger(__name__)

SHORT_TEXT = 20
LONG_TEXT = 200
DEAD_ZONE = 0.2

_COMMENT_PROMPT = """Analyze the sentiment of this comment about a news article. Determine if the comment is:
1. SUPPORTING - The comment supports the article as true/credible
2. CLAIMING_FAKE - The comment claims the article is fake/misleading
3. NEUTRAL - The comment is neutral or unclear

Comment: "{text}"

Respond with ONLY one of these three labels: SUPPORTING, CLAIMING_FAKE, or NEUTRAL"""

_POST_PROMPT = """Analyze this news article to determine its likely veracity. Consider the content, tone, and credibility indicators. Determine if the article is:
1. TRUE - The article appears to be factual and credible
2. FAKE - The article appears to be fake, misleading, or unreliable
3. NEUTRAL - The article's veracity is unclear or mixed

Article: "{text}"

Respond with ONLY one of these three labels: TRUE, FAKE, or NEUTRAL"""


def _clamp(score: float, confidence: float) -> Tuple[float, float]:
    return max(-1.0, min(1.0, score)), max(0.1, min(1.0, confidence))


def build_prompt(text: str, content_type: ContentType) -> str:
    template = _COMMENT_PROMPT if content_type == ContentType.COMMENT else _POST_PROMPT
    return template.format(text=text)


def parse_label(response: str, content_type: ContentType) -> str:
    """Pick the first label token found in the model output; neutral otherwise."""
    clean = response.lower().strip()
    if content_type == ContentType.COMMENT:
        if "supporting" in clean:
            return "supporting"
        if "claiming_fake" in clean or "claiming fake" in clean:
            return "claiming_fake"
    else:
        if "true" in clean:
            return "true"
        if "fake" in clean:
            return "fake"
    return "neutral"


def base_metrics(label: str, text: str) -> Tuple[float, float]:
    if label in ("supporting", "true"):
        score, confidence = 0.8, 0.7
    elif label in ("claiming_fake", "fake"):
        score, confidence = -0.8, 0.7
    else:
        score, confidence = 0.0, 0.5

    # short texts carry too little signal; long ones give the model context
    if len(text) < SHORT_TEXT:
        confidence *= 0.7
    elif len(text) > LONG_TEXT:
        confidence *= 1.1
    return score, confidence


def reinforce_with_keywords(label: str, score: float, confidence: float, text: str,
                            content_type: ContentType) -> Tuple[str, float, float]:
    """Push the model result toward a strictly dominant lexical signal."""
    positive, negative, _ = labels_for(content_type)
    lower = text.lower()
    fake_hits = count_hits(lower, FAKE_NEWS_INDICATORS)
    credible_hits = count_hits(lower, CREDIBILITY_INDICATORS)

    if fake_hits > credible_hits and fake_hits > 0:
        return negative, -max(abs(score), 0.8), max(confidence, 0.8)
    if credible_hits > fake_hits and credible_hits > 0:
        return positive, max(abs(score), 0.8), max(confidence, 0.8)
    return label, score, confidence


def fallback_classify(text: str, content_type: ContentType) -> SentimentVerdict:
    """Keyword-weighted verdict that needs no inference backend."""
    positive, negative, neutral = labels_for(content_type)
    lower = text.lower()
    supporting = weighted_hits(lower, SUPPORTING_WEIGHTS)
    fake = weighted_hits(lower, FAKE_WEIGHTS)
    hedging = weighted_hits(lower, NEUTRAL_WEIGHTS)
    total = supporting + fake + hedging

    score, label, confidence = 0.0, neutral, 0.3
    if total > 0:
        score = (supporting - fake) / total
        confidence = min(total / 10, 0.8)
        if score > DEAD_ZONE:
            label = positive
        elif score < -DEAD_ZONE:
            label = negative

    score, confidence = _clamp(score, confidence)
    return SentimentVerdict(score=score, label=label, confidence=confidence)


def _model_classify(text: str, content_type: ContentType, client: OllamaClient) -> SentimentVerdict:
    raw = client.generate(build_prompt(text, content_type))
    logger.debug("Ollama response: %r", raw)
    label = parse_label(raw, content_type)
    score, confidence = base_metrics(label, text)
    label, score, confidence = reinforce_with_keywords(label, score, confidence, text, content_type)
    score, confidence = _clamp(score, confidence)
    return SentimentVerdict(score=score, label=label, confidence=confidence)


def classify_text(text: str, content_type: ContentType, client: OllamaClient) -> SentimentVerdict:
    """Classify a comment or post, falling back to keywords if the model call fails."""
    content_type = ContentType(content_type)
    try:
        verdict = _model_classify(text, content_type, client)
    except Exception as e:
        logger.warning("Ollama analysis failed (%s), using keyword fallback", e)
        verdict = fallback_classify(text, content_type)

    logger.info("Classified %s as %s (score=%.2f, confidence=%.2f)",
                content_type.value, verdict.label, verdict.score, verdict.confidence)
    return verdict
