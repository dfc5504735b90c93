from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from portal.core.db import Base


class NotificationLog(Base):
    __tablename__ = "notification_logs"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    body = Column(Text, nullable=False)
    target_type = Column(String(16), nullable=False, index=True)  # token, topic, content
    target_value = Column(Text, nullable=True)
    content_type = Column(String(32), nullable=True)
    sent_by = Column(String(255), nullable=True)
    success = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
