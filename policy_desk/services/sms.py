from policy_desk.db.models.policy import Policy as PolicyModel
from policy_desk.domain.notifications import format_display_date
from policy_desk.schemas.policy import PolicySms


def build_renewal_sms(policy: PolicyModel) -> PolicySms:
    """
    Build the renewal reminder text for a policy holder.

    Nothing is sent: the phone number and text are handed back for an
    external SMS provider.
    """
    message = (
        f"Hello {policy.name}, please remember to renew your {policy.insurance_type} "
        f"policy (Policy No: {policy.policy_number}). "
        f"It expires on {format_display_date(policy.policy_end_date)}."
    )
    return PolicySms(phone_number=policy.phone_number, message=message)
