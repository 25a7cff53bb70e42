# =============================================================================
# core/services/member_service.py - Member Management
# =============================================================================
# Owner-only operations on household membership: invite, remove, and
# change role. Enforces the household limits:
#   - at most MAX_USERS users
#   - at most MAX_OWNERS owners
#   - the sole owner can't demote themself
# A rejected operation never writes anything.
# =============================================================================

import logging
from uuid import UUID

from lib.supabase_client import SupabaseClient
from lib.utils import normalize_email, utc_now_iso
from core.models import (
    EMAIL_PATTERN,
    MAX_OWNERS,
    MAX_USERS,
    HouseholdUser,
    InvitationRequest,
    InvitationResult,
    UserRole,
)
from core.services.household_service import HouseholdService
from core.services.invitation_service import InvitationService
from app.exceptions import (
    DuplicateMemberError,
    HouseholdFullError,
    LastOwnerError,
    MemberNotFoundError,
    OwnerLimitError,
    OwnerRequiredError,
    SelfRemovalError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def _owner_count(members: list[HouseholdUser]) -> int:
    return sum(1 for m in members if m.is_owner)


class MemberService:
    """Service for inviting, removing, and re-roling household members."""

    @staticmethod
    def get_member(member: HouseholdUser, member_id: UUID | str) -> HouseholdUser:
        """
        Get another user of the caller's household.

        Raises:
            MemberNotFoundError: If the ID is unknown or in another household
        """
        row = SupabaseClient.fetch_row(
            "household_users",
            filters={"id": member_id, "household_id": member.household_id},
        )
        if not row:
            raise MemberNotFoundError(str(member_id))
        return HouseholdUser(**row)

    @staticmethod
    def invite_member(
        member: HouseholdUser,
        name: str,
        email: str,
        role: UserRole = UserRole.MEMBER,
    ) -> tuple[HouseholdUser, InvitationResult]:
        """
        Invite someone to the household.

        Creates a pending HouseholdUser (auth_user_id = null) and emails the
        invitee. An email failure is logged and returned, but the
        invitation itself still stands.

        Returns:
            Tuple of (new household user, email result)

        Raises:
            ValidationFailedError: Blank name or malformed email
            OwnerRequiredError: Caller is not an owner
            HouseholdFullError: Household already has MAX_USERS users
            OwnerLimitError: Inviting an owner when MAX_OWNERS exist
            DuplicateMemberError: Email already in the household
        """
        name = (name or "").strip()
        email = normalize_email(email or "")

        if not name:
            raise ValidationFailedError("Name is required", field="name")
        if not email:
            raise ValidationFailedError("Email is required", field="email")
        if not EMAIL_PATTERN.match(email):
            raise ValidationFailedError("Please enter a valid email address", field="email")

        if not member.is_owner:
            raise OwnerRequiredError("invite users")

        members = HouseholdService.list_members(member)
        if len(members) >= MAX_USERS:
            raise HouseholdFullError(MAX_USERS)
        if role == UserRole.OWNER and _owner_count(members) >= MAX_OWNERS:
            raise OwnerLimitError(MAX_OWNERS)
        if any(m.email == email for m in members):
            raise DuplicateMemberError(email)

        row = SupabaseClient.insert_row(
            "household_users",
            {
                "household_id": member.household_id,
                "name": name,
                "email": email,
                "role": role.value,
                "auth_user_id": None,
            },
        )
        invited = HouseholdUser(**row)
        logger.info(f"Invited {invited.id} to household {member.household_id} as {role.value}")

        household = HouseholdService.get_household(member)
        result = InvitationService.send_invitation(
            InvitationRequest(
                invitee_name=name,
                invitee_email=email,
                inviter_name=member.name,
                household_name=household.name,
            )
        )
        if not result.success:
            logger.warning(f"Invitation email for {invited.id} was not sent: {result.error}")

        return invited, result

    @staticmethod
    def remove_member(member: HouseholdUser, member_id: UUID | str) -> HouseholdUser:
        """
        Remove a user from the household.

        Raises:
            SelfRemovalError: Caller tried to remove themself
            OwnerRequiredError: Caller is not an owner
            MemberNotFoundError: Target is not in the household
        """
        if str(member_id) == str(member.id):
            raise SelfRemovalError()
        if not member.is_owner:
            raise OwnerRequiredError("remove members")

        target = MemberService.get_member(member, member_id)
        SupabaseClient.delete_rows("household_users", filters={"id": target.id})

        logger.info(f"Removed member {target.id} from household {member.household_id}")
        return target

    @staticmethod
    def change_role(
        member: HouseholdUser,
        member_id: UUID | str,
        new_role: UserRole,
    ) -> HouseholdUser:
        """
        Promote a member to owner or demote an owner to member.

        Setting the role a member already has is a no-op.

        Raises:
            OwnerRequiredError: Caller is not an owner
            MemberNotFoundError: Target is not in the household
            LastOwnerError: The sole owner tried to demote themself
            OwnerLimitError: Promotion would exceed MAX_OWNERS
        """
        if not member.is_owner:
            raise OwnerRequiredError("change member roles")

        target = MemberService.get_member(member, member_id)
        if target.role == new_role:
            return target

        members = HouseholdService.list_members(member)
        owners = _owner_count(members)

        if new_role == UserRole.MEMBER and target.is_owner and owners <= 1:
            raise LastOwnerError()
        if new_role == UserRole.OWNER and owners >= MAX_OWNERS:
            raise OwnerLimitError(MAX_OWNERS)

        updated = SupabaseClient.update_rows(
            "household_users",
            {"role": new_role.value, "updated_at": utc_now_iso()},
            filters={"id": target.id},
        )
        if not updated:
            raise MemberNotFoundError(str(member_id))

        logger.info(f"Member {target.id} is now {new_role.value}")
        return HouseholdUser(**updated[0])
