import time
import uuid

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from policy_desk.core.security import verify_password
from policy_desk.db.base import Base, utcnow


def generate_tenant_id() -> str:
    """Creation time in nanoseconds (hex) plus a random suffix: sorts by creation, never repeats."""
    return f"{time.time_ns():x}{uuid.uuid4().hex[:8]}"


class Admin(Base):
    """Aggregate root: an agency admin and the policies it owns.

    The admin row is the unit of persistence. Policies have no existence of
    their own; they are appended, mutated and removed through this object and
    written together when the session commits.
    """

    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    tenant_id = Column(String(64), unique=True, nullable=False, default=generate_tenant_id)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Insertion order is kept in Policy.position
    policies = relationship(
        "Policy",
        back_populates="admin",
        order_by="Policy.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    def compare_password(self, candidate_password: str) -> bool:
        return verify_password(candidate_password, self.password_hash)

    def find_policy(self, policy_id: str):
        """Return the owned policy with this identifier, or None."""
        return next((p for p in self.policies if p.id == policy_id), None)

    def find_policy_by_number(self, policy_number: str):
        """Return the first owned policy (in collection order) with this policy number, or None."""
        return next((p for p in self.policies if p.policy_number == policy_number), None)

    def has_policy_number(self, policy_number: str) -> bool:
        # Exact, case-sensitive match
        return any(p.policy_number == policy_number for p in self.policies)

    def append_policy(self, policy) -> None:
        self.policies.append(policy)

    def remove_policies_by_number(self, policy_number: str) -> int:
        """Remove every owned policy carrying this policy number and return how many went."""
        matches = [p for p in self.policies if p.policy_number == policy_number]
        for policy in matches:
            self.policies.remove(policy)
        if matches:
            # ordering_list does not renumber on removal
            self.policies.reorder()
        return len(matches)
