from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from policy_desk.api.deps import get_current_admin, get_db
from policy_desk.db.models.admin import Admin as AdminModel
from policy_desk.schemas.notification import NotificationList
from policy_desk.schemas.policy import (
    Policy,
    PolicyCreate,
    PolicyDeleted,
    PolicyRenew,
    PolicyRenewed,
    PolicySms,
)
from policy_desk.services import policy as policy_service
from policy_desk.services.report import render_policy_report, report_content_disposition
from policy_desk.services.sms import build_renewal_sms

router = APIRouter(prefix="/policies", tags=["policies"])

# Static paths (/search, /notifications) are declared before /{policy_id}


@router.post("", response_model=Policy, status_code=status.HTTP_201_CREATED)
def add_policy(
    policy_data: PolicyCreate,
    db: Session = Depends(get_db),
    current_admin: AdminModel = Depends(get_current_admin),
):
    """Add a policy. The policy number must not already exist among this admin's policies."""
    policy = policy_service.add_policy(db, current_admin, policy_data)
    return Policy.model_validate(policy)


@router.get("", response_model=list[Policy])
def list_policies(current_admin: AdminModel = Depends(get_current_admin)):
    """All policies of the logged-in admin, in the order they were added."""
    return [Policy.model_validate(p) for p in policy_service.list_policies(current_admin)]


@router.get("/search", response_model=list[Policy])
def search_policies(
    q: str = Query("", description="Matched case-insensitively against holder name and policy number"),
    current_admin: AdminModel = Depends(get_current_admin),
):
    """
    Search policies by holder name or policy number.
    An empty query returns every policy.
    """
    return [Policy.model_validate(p) for p in policy_service.search_policies(current_admin, q)]


@router.get("/notifications", response_model=NotificationList)
def get_notifications(current_admin: AdminModel = Depends(get_current_admin)):
    """Notifications for policies that have expired or expire within the notification window."""
    digest = policy_service.get_notifications(current_admin)
    return NotificationList.model_validate(digest)


@router.get("/{policy_id}", response_model=Policy)
def get_policy_by_id(
    policy_id: str,
    current_admin: AdminModel = Depends(get_current_admin),
):
    return Policy.model_validate(policy_service.get_policy_by_id(current_admin, policy_id))


@router.put("/{policy_id}/renew", response_model=PolicyRenewed)
def renew_policy(
    policy_id: str,
    patch: PolicyRenew,
    db: Session = Depends(get_db),
    current_admin: AdminModel = Depends(get_current_admin),
):
    """
    Renew (update) a policy.

    Fields not included in the request are not updated. Provided fields are
    written as-is: no uniqueness check on policy_number, no date ordering check.
    """
    policy = policy_service.renew_policy(db, current_admin, policy_id, patch)
    return PolicyRenewed(message="Policy updated successfully", policy=Policy.model_validate(policy))


@router.delete("/{policy_number}", response_model=PolicyDeleted)
def delete_policy(
    policy_number: str,
    db: Session = Depends(get_db),
    current_admin: AdminModel = Depends(get_current_admin),
):
    """
    Delete every policy with this policy number.
    Succeeds even when nothing matched (deleted_count = 0).
    """
    deleted_count = policy_service.delete_policy(db, current_admin, policy_number)
    return PolicyDeleted(message="Policy deleted successfully", deleted_count=deleted_count)


@router.post("/{policy_id}/send-sms", response_model=PolicySms)
def send_policy_sms(
    policy_id: str,
    current_admin: AdminModel = Depends(get_current_admin),
):
    """Return the holder's phone number and a renewal reminder ready to hand to an SMS provider."""
    policy = policy_service.get_policy_by_id(current_admin, policy_id)
    return build_renewal_sms(policy)


@router.get(
    "/{policy_number}/report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def generate_policy_report(
    policy_number: str,
    current_admin: AdminModel = Depends(get_current_admin),
):
    """Download a PDF report for the policy with this policy number."""
    policy = policy_service.get_policy_by_number(current_admin, policy_number)
    return Response(
        content=render_policy_report(policy),
        media_type="application/pdf",
        headers={"Content-Disposition": report_content_disposition(policy)},
    )
