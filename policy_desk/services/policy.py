"""Policy store: operations on the policies embedded in one admin aggregate.

Every mutation follows the same shape: change the admin's in-memory policy
collection, then save the whole aggregate once. There is no version column
or row lock, so two requests mutating the same admin concurrently can
overwrite each other (last commit wins).
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

import policy_desk.repositories.admin as admin_repo
from policy_desk.core.config import settings
from policy_desk.db.models.admin import Admin as AdminModel
from policy_desk.db.models.policy import (
    MESSAGE_STATUS_PENDING,
    Policy as PolicyModel,
    PolicyMessage as PolicyMessageModel,
    generate_policy_id,
)
from policy_desk.domain.notifications import NotificationDigest, derive_notifications
from policy_desk.domain.policy_search import PolicySearch
from policy_desk.errors import DuplicateResourceError, NotFoundError
from policy_desk.schemas.policy import PolicyCreate, PolicyRenew

logger = logging.getLogger(__name__)


def add_policy(db: Session, admin: AdminModel, policy_data: PolicyCreate) -> PolicyModel:
    """
    Add a policy to the admin's collection.

    - Policy number must be unique within this admin's policies (exact match);
      other admins may use the same number
    - Messages default to status "pending" and sent_at = now

    Raises:
        DuplicateResourceError: If the admin already holds this policy number.
    """
    if admin.has_policy_number(policy_data.policy_number):
        logger.warning(
            "Admin %s tried to add duplicate policy number %s",
            admin.id,
            policy_data.policy_number,
        )
        raise DuplicateResourceError("Policy number already exists")

    now = datetime.now(timezone.utc)
    policy = PolicyModel(
        id=generate_policy_id(),
        **policy_data.model_dump(exclude={"messages"}),
        messages=[
            PolicyMessageModel(
                content=msg.content,
                status=msg.status or MESSAGE_STATUS_PENDING,
                sent_at=msg.sent_at or now,
            )
            for msg in policy_data.messages or []
        ],
    )
    admin.append_policy(policy)
    admin_repo.save_admin(db, admin)

    logger.info("Admin %s added policy %s (%s)", admin.id, policy.id, policy.policy_number)
    return policy


def list_policies(admin: AdminModel) -> list[PolicyModel]:
    """All of the admin's policies, in insertion order."""
    return list(admin.policies)


def get_policy_by_id(admin: AdminModel, policy_id: str) -> PolicyModel:
    policy = admin.find_policy(policy_id)
    if not policy:
        raise NotFoundError("Policy not found")
    return policy


def get_policy_by_number(admin: AdminModel, policy_number: str) -> PolicyModel:
    policy = admin.find_policy_by_number(policy_number)
    if not policy:
        raise NotFoundError("Policy not found")
    return policy


def search_policies(admin: AdminModel, query: str) -> list[PolicyModel]:
    """Policies whose holder name or policy number contains the query (case-insensitive)."""
    return PolicySearch(query).filter(admin.policies)


def renew_policy(
    db: Session, admin: AdminModel, policy_id: str, patch: PolicyRenew
) -> PolicyModel:
    """
    Overwrite the fields present in the patch and save.

    No business validation is repeated here: the new policy number may
    duplicate another of the admin's policies, and the end date may end up
    before the start date.

    Raises:
        NotFoundError: If the admin has no policy with this id.
    """
    policy = get_policy_by_id(admin, policy_id)

    changes = patch.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(policy, field, value)

    admin_repo.save_admin(db, admin)
    logger.info("Admin %s renewed policy %s (fields: %s)", admin.id, policy.id, sorted(changes))
    return policy


def delete_policy(db: Session, admin: AdminModel, policy_number: str) -> int:
    """
    Remove every policy carrying this policy number and return how many were removed.

    Succeeds with 0 when nothing matches.
    """
    removed = admin.remove_policies_by_number(policy_number)
    admin_repo.save_admin(db, admin)
    logger.info("Admin %s deleted %d policies numbered %s", admin.id, removed, policy_number)
    return removed


def get_notifications(admin: AdminModel, now: datetime | None = None) -> NotificationDigest:
    """Expiring and expired policy notifications, computed fresh on every call."""
    if now is None:
        now = datetime.now(timezone.utc)
    return derive_notifications(
        admin.policies, now, window_days=settings.notification_window_days
    )
