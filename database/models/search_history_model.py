# database/models/search_history_model.py
from sqlalchemy import Column, Integer, String, Text, JSON, DateTime
from sqlalchemy.sql import func
from database.db import Base


class SearchHistory(Base):
    __tablename__ = "search_history"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)

    query = Column(Text, nullable=False)
    expanded_query = Column(Text, nullable=False)

    # Copies of the top-ranked citations as serialized at response time
    results = Column(JSON, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
