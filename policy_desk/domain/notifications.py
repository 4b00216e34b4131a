from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Protocol

DEFAULT_WINDOW_DAYS = 14

TITLE_EXPIRED = "Policy Expired"
TITLE_EXPIRING = "Policy Expiring Soon"
STATUS_EXPIRED = "Expired"
STATUS_EXPIRING = "Expiring Soon"

_ONE_DAY = timedelta(days=1)


class DatedPolicy(Protocol):
    id: str
    name: str
    policy_number: str
    policy_end_date: datetime


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as read back from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_display_date(value: datetime) -> str:
    """Render a date as e.g. 'Mon Oct 19 2026'."""
    return as_utc(value).strftime("%a %b %d %Y")


def days_until(end: datetime, now: datetime) -> int:
    """Whole days from now until end, rounded up. Zero or negative once end has passed."""
    return -((as_utc(now) - as_utc(end)) // _ONE_DAY)


def is_expired(end: datetime, now: datetime) -> bool:
    # Exact timestamp comparison, not truncated to the day
    return as_utc(end) < as_utc(now)


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    title: str
    message: str
    holder_name: str
    due_date: datetime
    status: str
    dismissible: bool = True
    popup: bool = True


@dataclass(frozen=True, slots=True)
class NotificationDigest:
    count: int
    notifications: list[Notification]


def build_notification(policy: DatedPolicy, now: datetime) -> Notification:
    end = policy.policy_end_date
    if is_expired(end, now):
        return Notification(
            id=policy.id,
            title=TITLE_EXPIRED,
            message=(
                f"The policy for {policy.name} (Policy No: {policy.policy_number}) "
                "has already expired."
            ),
            holder_name=policy.name,
            due_date=end,
            status=STATUS_EXPIRED,
        )
    return Notification(
        id=policy.id,
        title=TITLE_EXPIRING,
        message=(
            f"The policy for {policy.name} (Policy No: {policy.policy_number}) "
            f"will expire on {format_display_date(end)}."
        ),
        holder_name=policy.name,
        due_date=end,
        status=STATUS_EXPIRING,
    )


def derive_notifications(
    policies: Iterable[DatedPolicy],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> NotificationDigest:
    """Compute renewal notifications for a collection of policies.

    Two different granularities apply to the same end date:
    - inclusion: the policy ends within ``window_days`` whole days, rounding the
      remaining time *up* to full days. There is no lower bound, so policies that
      ended long ago are included too.
    - classification: expired iff the end timestamp is strictly before ``now``.

    A policy ending a few hours from now is 1 day away and "Expiring Soon"; one
    that ended an hour ago is 0 days away and "Expired". Output keeps the
    order of ``policies``.
    """
    notifications = [
        build_notification(policy, now)
        for policy in policies
        if days_until(policy.policy_end_date, now) <= window_days
    ]
    return NotificationDigest(count=len(notifications), notifications=notifications)
