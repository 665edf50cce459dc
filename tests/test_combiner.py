"""Tests for combining community votes with automated post verdicts."""
import pytest

from crowdcheck.combiner import combine_verdict, comment_badge, vote_consensus
from crowdcheck.models import SentimentVerdict, VoteTally


def _verdict(label, confidence, score=0.0):
    return SentimentVerdict(score=score, label=label, confidence=confidence)


class TestCombineVerdict:
    def test_no_votes_no_verdict_is_fully_neutral(self):
        result = combine_verdict(VoteTally())
        assert result.status == "neutral"
        assert result.confidence == 1
        assert result.label == "○ Neutral"

    def test_unanimous_true_votes(self):
        result = combine_verdict(VoteTally(true_votes=10))
        assert result.status == "true"
        assert result.confidence == pytest.approx(0.6)
        assert result.label == "✓ Verified as True"

    def test_fake_verdict_without_votes(self):
        result = combine_verdict(VoteTally(), _verdict("fake", 0.9, -0.8))
        assert result.status == "fake"
        assert result.confidence == pytest.approx(0.36)
        assert result.label == "✗ Marked as Fake"

    def test_weak_verdict_is_ignored(self):
        """A stored confidence of exactly 0.1 contributes nothing."""
        result = combine_verdict(VoteTally(), _verdict("true", 0.1, 0.8))
        assert result.status == "neutral"
        assert result.confidence == 1

    def test_neutral_verdict_contributes_nothing(self):
        result = combine_verdict(VoteTally(true_votes=1, fake_votes=1), _verdict("neutral", 0.9))
        assert result.status == "neutral"
        assert result.confidence == 1

    def test_votes_and_verdict_add_up(self):
        """vote 0.5 * 0.6 + sentiment 0.8 * 0.4 = 0.62."""
        result = combine_verdict(VoteTally(true_votes=3, fake_votes=1), _verdict("true", 0.8, 0.8))
        assert result.status == "true"
        assert result.confidence == pytest.approx(0.62)

    def test_small_signal_inside_dead_zone(self):
        """Split votes plus a weak fake verdict: -0.08 stays neutral."""
        result = combine_verdict(VoteTally(true_votes=1, fake_votes=1), _verdict("fake", 0.2, -0.8))
        assert result.status == "neutral"
        assert result.confidence == pytest.approx(0.92)

    def test_neutral_votes_dilute_the_balance(self):
        """(2 - 0) / 10 * 0.6 = 0.12."""
        result = combine_verdict(VoteTally(true_votes=2, neutral_votes=8))
        assert result.status == "true"
        assert result.confidence == pytest.approx(0.12)

    def test_votes_outweigh_opposite_verdict(self):
        """-1 * 0.6 + 0.9 * 0.4 = -0.24."""
        result = combine_verdict(VoteTally(fake_votes=5), _verdict("true", 0.9, 0.8))
        assert result.status == "fake"
        assert result.confidence == pytest.approx(0.24)


class TestVoteConsensus:
    @pytest.mark.parametrize("tally,expected", [
        (VoteTally(), "none"),
        (VoteTally(true_votes=3, fake_votes=7), "fake"),
        (VoteTally(true_votes=7, neutral_votes=3), "true"),
        (VoteTally(true_votes=6, fake_votes=4), "mixed"),
        (VoteTally(neutral_votes=5), "mixed"),
    ])
    def test_consensus(self, tally, expected):
        assert vote_consensus(tally) == expected


class TestCommentBadge:
    def test_supporting(self):
        assert comment_badge("supporting", 0.5) == {"label": "supporting", "text": "Supporting"}

    def test_claiming_fake(self):
        assert comment_badge("claiming_fake", 0.8)["text"] == "Claiming Fake"

    def test_threshold_is_inclusive(self):
        assert comment_badge("neutral", 0.2)["text"] == "Neutral"

    @pytest.mark.parametrize("label,confidence", [
        ("claiming_fake", 0.19),
        (None, 0.9),
        ("supporting", None),
        ("true", 0.9),
    ])
    def test_hidden(self, label, confidence):
        assert comment_badge(label, confidence) is None
