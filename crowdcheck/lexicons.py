# crowdcheck/lexicons.py
"""Keyword tables for the sentiment heuristics.

Matching is a case-insensitive substring test against the lower-cased text,
so multi-word entries ("made up", "not sure") and hyphenated ones work as-is.
"""
from types import MappingProxyType

# Reinforcement pass: plain membership counts, no weights.
FAKE_NEWS_INDICATORS = frozenset("""
fake false misleading hoax scam fraud manipulated doctored photoshopped staged
fabricated unreliable conspiracy propaganda disinformation misinformation
""".split()) | {"made up"}

CREDIBILITY_INDICATORS = frozenset("""
credible reliable verified confirmed accurate factual evidence proof documented
legitimate authentic trustworthy peer-reviewed scientific official authoritative
""".split())

# Fallback analyzer: term -> weight, more specific terms weigh more.
SUPPORTING_WEIGHTS = MappingProxyType({
    "credible": 2, "reliable": 2, "verified": 3, "confirmed": 3, "accurate": 2,
    "true": 1, "factual": 2, "evidence": 3, "proof": 3, "documented": 2,
    "legitimate": 2, "authentic": 2, "trustworthy": 2, "believable": 1,
    "convincing": 1, "solid": 1, "valid": 1, "genuine": 1, "real": 1,
})

FAKE_WEIGHTS = MappingProxyType({
    "fake": 3, "false": 2, "misleading": 2, "deceptive": 2, "unreliable": 2,
    "doubtful": 1, "suspicious": 2, "questionable": 1, "inaccurate": 2,
    "wrong": 1, "incorrect": 1, "hoax": 3, "scam": 3, "fraud": 3,
    "manipulated": 3, "doctored": 3, "photoshopped": 3, "staged": 2,
    "fabricated": 3, "made up": 2,
})

NEUTRAL_WEIGHTS = MappingProxyType({
    "maybe": 1, "perhaps": 1, "possibly": 1, "might": 1, "could": 1,
    "uncertain": 2, "unclear": 1, "skeptical": 2, "doubt": 2, "question": 1,
    "wonder": 1, "not sure": 2, "need more info": 2, "wait and see": 1,
    "time will tell": 1, "jury is out": 1,
})


def count_hits(lower_text: str, terms) -> int:
    return sum(1 for t in terms if t in lower_text)


def weighted_hits(lower_text: str, weights) -> int:
    return sum(w for t, w in weights.items() if t in lower_text)
