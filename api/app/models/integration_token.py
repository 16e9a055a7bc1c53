"""
Integration Token Model - OAuth tokens for third-party APIs, one row per provider
"""
from sqlalchemy import Column, Text, DateTime, func

from app.utils.database import Base


class IntegrationToken(Base):
    __tablename__ = "integration_tokens"

    provider = Column(Text, primary_key=True)  # "amadeus"
    access_token = Column(Text, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<IntegrationToken {self.provider} expires {self.expires_at}>"
