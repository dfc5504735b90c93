from sqlalchemy import Column, String, Integer, DateTime, Text, UniqueConstraint, func

from portal.core.db import Base


class DeviceRegistration(Base):
    __tablename__ = "device_registrations"
    __table_args__ = (
        UniqueConstraint("user_id", "token", name="uq_device_registrations_user_token"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), nullable=False, index=True)
    token = Column(Text, nullable=False)
    locale = Column(String(8), nullable=False, default="en")  # en | ta
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<DeviceRegistration id={self.id} user_id={self.user_id} locale={self.locale}>"
