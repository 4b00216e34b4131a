from policy_desk.db.models.admin import Admin
from policy_desk.db.models.policy import Policy, PolicyMessage

__all__ = ["Admin", "Policy", "PolicyMessage"]
