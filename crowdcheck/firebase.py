# crowdcheck/firebase.py
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import firebase_admin
from firebase_admin import credentials, firestore

from .models import SentimentVerdict, VoteTally

logger = logging.getLogger(__name__)

_DB = None


class NotFound(LookupError):
    """Raised when a post or comment document does not exist."""
    pass


def init_firebase(project_id: Optional[str] = None):
    global _DB
    if _DB is not None:
        return _DB

    cred_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    if not cred_path or not os.path.exists(cred_path):
        raise FileNotFoundError(
            f"Firebase service account key not found. "
            f"GOOGLE_APPLICATION_CREDENTIALS='{cred_path}'."
        )

    if not firebase_admin._apps:
        cred = credentials.Certificate(cred_path)
        options = {"projectId": project_id} if project_id else None
        firebase_admin.initialize_app(cred, options)

    _DB = firestore.client()
    return _DB


def get_db(project_id: Optional[str] = None):
    return init_firebase(project_id)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SentimentStore:
    """Reads vote tallies and writes verdicts on the ``posts``/``comments`` collections."""

    def __init__(self, db):
        self.db = db

    def _update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        ref = self.db.collection(collection).document(doc_id)
        if not ref.get().exists:
            raise NotFound(f"{collection}/{doc_id}")
        ref.update(data)
        logger.info("Stored sentiment on %s/%s", collection, doc_id)

    def save_comment_sentiment(self, comment_id: str, verdict: SentimentVerdict) -> None:
        self._update("comments", comment_id, {
            "sentiment_score": verdict.score,
            "sentiment_label": verdict.label,
            "sentiment_confidence": verdict.confidence,
            "analyzed_at": _now(),
        })

    def save_post_sentiment(self, post_id: str, verdict: SentimentVerdict) -> None:
        self._update("posts", post_id, {
            "overall_sentiment_score": verdict.score,
            "overall_sentiment_label": verdict.label,
            "overall_sentiment_confidence": verdict.confidence,
            "sentiment_analyzed_at": _now(),
        })

    def get_post(self, post_id: str) -> Tuple[VoteTally, Optional[SentimentVerdict]]:
        """Vote tally and stored overall verdict (if any) of a post."""
        snap = self.db.collection("posts").document(post_id).get()
        if not snap.exists:
            raise NotFound(f"posts/{post_id}")
        data = snap.to_dict() or {}

        tally = VoteTally(
            true_votes=int(data.get("true_votes") or 0),
            fake_votes=int(data.get("fake_votes") or 0),
            neutral_votes=int(data.get("neutral_votes") or 0),
        )

        label = data.get("overall_sentiment_label")
        confidence = data.get("overall_sentiment_confidence")
        verdict = None
        # rows written by failed client-side analysis carry confidence 0
        if label and confidence is not None and 0.1 <= float(confidence) <= 1.0:
            verdict = SentimentVerdict(
                score=max(-1.0, min(1.0, float(data.get("overall_sentiment_score") or 0.0))),
                label=label,
                confidence=float(confidence),
            )
        return tally, verdict
