# File: services/search_history_service.py
import logging
from typing import Any, Callable, Dict, List

from sqlalchemy.orm import Session

from database.models.search_history_model import SearchHistory

logger = logging.getLogger(__name__)


class SearchHistoryStore:
    """
    Persists one row per answered query.
    `record` never raises: persistence problems must not reach the caller.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def record(
        self,
        user_id: str,
        query: str,
        expanded_query: str,
        top_results: List[Dict[str, Any]],
    ) -> bool:
        db = None
        try:
            db = self.session_factory()
            db.add(SearchHistory(
                user_id=user_id,
                query=query,
                expanded_query=expanded_query,
                results=top_results,
            ))
            db.commit()
            logger.info(f"💾 Stored search history for user {user_id}")
            return True
        except Exception as e:
            logger.error(f"Failed to store search history: {e}", exc_info=True)
            if db is not None:
                try:
                    db.rollback()
                except Exception:
                    logger.debug("Rollback after history failure also failed", exc_info=True)
            return False
        finally:
            if db is not None:
                db.close()
