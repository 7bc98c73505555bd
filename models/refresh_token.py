"""
RefreshToken model: opaque refresh tokens, revocable and time bound.
Fields:
- token (primary key, 64 hex chars)
- user_id (String(36)) - FK to users.id
- created_at, updated_at, expires_at
- revoked_at (NULL while the token is active)

Expiry is never written back; it is only compared at read time.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from models.base_model import TimestampMixin, Base


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    __table_args__ = (
        Index("ix_refresh_tokens_user_active", "user_id", "revoked_at"),
    )

    def __repr__(self):
        return f"<RefreshToken user_id={self.user_id} token={self.token[:8]}...>"
