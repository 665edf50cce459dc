"""Blend community votes with the stored automated verdict of a post."""

from typing import Dict, Optional

from .models import CombinedVerdict, SentimentVerdict, VoteTally

VOTE_WEIGHT = 0.6
SENTIMENT_WEIGHT = 0.4
STATUS_DEAD_ZONE = 0.1
MIN_SENTIMENT_CONFIDENCE = 0.1
CONSENSUS_RATIO = 0.6
COMMENT_BADGE_THRESHOLD = 0.2

_STATUS_LABELS = {
    "true": "✓ Verified as True",
    "fake": "✗ Marked as Fake",
    "neutral": "○ Neutral",
}

_COMMENT_BADGES = {
    "supporting": "Supporting",
    "claiming_fake": "Claiming Fake",
    "neutral": "Neutral",
}


def _sentiment_score(stored: Optional[SentimentVerdict]) -> float:
    if stored is None or stored.confidence <= MIN_SENTIMENT_CONFIDENCE:
        return 0.0
    if stored.label == "true":
        return stored.confidence
    if stored.label == "fake":
        return -stored.confidence
    return 0.0


def combine_verdict(tally: VoteTally, stored: Optional[SentimentVerdict] = None) -> CombinedVerdict:
    """Weighted blend of the vote balance and the post's automated verdict.

    Votes count for 0.6 and the automated verdict for 0.4; a combined score
    within +-0.1 of zero is reported as neutral.
    """
    total = tally.total
    vote_score = (tally.true_votes - tally.fake_votes) / total if total > 0 else 0.0
    combined = vote_score * VOTE_WEIGHT + _sentiment_score(stored) * SENTIMENT_WEIGHT

    if combined > STATUS_DEAD_ZONE:
        status, confidence = "true", abs(combined)
    elif combined < -STATUS_DEAD_ZONE:
        status, confidence = "fake", abs(combined)
    else:
        status, confidence = "neutral", 1 - abs(combined)
    return CombinedVerdict(status=status, confidence=confidence, label=_STATUS_LABELS[status])


def vote_consensus(tally: VoteTally) -> str:
    """``fake``/``true`` when one side holds over 60% of votes, else ``mixed``."""
    total = tally.total
    if total == 0:
        return "none"
    if tally.fake_votes / total > CONSENSUS_RATIO:
        return "fake"
    if tally.true_votes / total > CONSENSUS_RATIO:
        return "true"
    return "mixed"


def comment_badge(label: Optional[str], confidence: Optional[float]) -> Optional[Dict[str, str]]:
    # weak verdicts are not shown at all
    if not label or confidence is None or confidence < COMMENT_BADGE_THRESHOLD:
        return None
    text = _COMMENT_BADGES.get(label)
    if text is None:
        return None
    return {"label": label, "text": text}
