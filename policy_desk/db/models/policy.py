import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from policy_desk.db.base import Base, utcnow

MESSAGE_STATUS_PENDING = "pending"
MESSAGE_STATUS_SENT = "sent"


def generate_policy_id() -> str:
    return str(uuid.uuid4())


class Policy(Base):
    __tablename__ = "policies"

    id = Column(String(36), primary_key=True, default=generate_policy_id)
    admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)

    # Policy holder
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    phone_number = Column(String(50), nullable=False)

    insurance_type = Column(String(100), nullable=False)
    insurance_company = Column(String(255), nullable=False)
    # Not unique at the database level: only add-policy enforces uniqueness per admin
    policy_number = Column(String(100), nullable=False, index=True)
    policy_start_date = Column(DateTime(timezone=True), nullable=False)
    policy_end_date = Column(DateTime(timezone=True), nullable=False)
    premium_amount = Column(Float, nullable=False)

    # Relationships
    admin = relationship("Admin", back_populates="policies")
    messages = relationship(
        "PolicyMessage",
        back_populates="policy",
        order_by="PolicyMessage.id",
        cascade="all, delete-orphan",
    )


class PolicyMessage(Base):
    __tablename__ = "policy_messages"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'sent')", name="ck_policy_messages_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    policy_id = Column(String(36), ForeignKey("policies.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(String(16), nullable=False, default=MESSAGE_STATUS_PENDING)

    policy = relationship("Policy", back_populates="messages")
