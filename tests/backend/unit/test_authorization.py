"""
Unit tests for domain.authorization.
The rules are pure functions over records, so no database is involved.
"""
import pytest

from taskhub.core.errors import BadRequestError, ForbiddenError
from taskhub.domain.authorization import (
    ALLOWED,
    DENIAL_MESSAGES,
    Action,
    Allowed,
    Denied,
    DenialKind,
    ReadPolicy,
    authorize,
    can_read,
    forbid_self_target,
    raise_for_decision,
    require_creator,
)
from taskhub.domain.records import CollectionRecord, RightFlags, RightsRecord

CREATOR = "11111111-1111-1111-1111-111111111111"
MEMBER = "22222222-2222-2222-2222-222222222222"
STRANGER = "33333333-3333-3333-3333-333333333333"

COLLECTION = CollectionRecord(id=1, name="Sprint", creator_id=CREATOR)

WRITE_ACTIONS = [Action.CREATE, Action.EDIT, Action.DELETE, Action.CHANGE_STATUS]


def rights(user_id=MEMBER, **flags) -> RightsRecord:
    return RightsRecord(user_id=user_id, collection_id=COLLECTION.id, flags=RightFlags(**flags))


class TestCreator:
    @pytest.mark.parametrize("action", list(Action))
    def test_creator_allowed_without_rights_row(self, action):
        assert authorize(CREATOR, COLLECTION, None, action) is ALLOWED

    @pytest.mark.parametrize("action", list(Action))
    def test_creator_allowed_even_with_all_flags_false(self, action):
        decision = authorize(CREATOR, COLLECTION, rights(user_id=CREATOR), action, ReadPolicy.ANY_RIGHT)
        assert isinstance(decision, Allowed)


class TestMembers:
    @pytest.mark.parametrize("action", list(Action))
    def test_no_rights_row_denied(self, action):
        decision = authorize(STRANGER, COLLECTION, None, action)
        assert decision == Denied(DENIAL_MESSAGES[action])

    def test_each_flag_grants_only_its_action(self):
        flag_for = {
            Action.CREATE: "create",
            Action.EDIT: "edit",
            Action.DELETE: "delete",
            Action.CHANGE_STATUS: "change_status",
        }
        for granted, flag in flag_for.items():
            row = rights(**{flag: True})
            for action in WRITE_ACTIONS:
                decision = authorize(MEMBER, COLLECTION, row, action)
                assert isinstance(decision, Allowed) == (action is granted)

    def test_rights_row_of_another_user_is_ignored(self):
        row = rights(user_id=STRANGER, create=True)
        assert isinstance(authorize(MEMBER, COLLECTION, row, Action.CREATE), Denied)

    def test_denial_messages(self):
        assert authorize(MEMBER, COLLECTION, None, Action.CREATE).reason == (
            "You don't have rights to create a new task"
        )
        assert authorize(MEMBER, COLLECTION, None, Action.CHANGE_STATUS).reason == (
            "You don't have rights to change status of tasks from this collection"
        )


class TestReadPolicy:
    def test_membership_allows_row_with_no_flags(self):
        assert authorize(MEMBER, COLLECTION, rights(), Action.READ) is ALLOWED

    def test_any_right_needs_a_flag(self):
        assert isinstance(authorize(MEMBER, COLLECTION, rights(), Action.READ, ReadPolicy.ANY_RIGHT), Denied)
        assert authorize(MEMBER, COLLECTION, rights(edit=True), Action.READ, ReadPolicy.ANY_RIGHT) is ALLOWED

    def test_can_read_without_row(self):
        assert can_read(None) is False
        assert can_read(None, ReadPolicy.ANY_RIGHT) is False


class TestCreatorOnlyChecks:
    def test_require_creator(self):
        assert require_creator(CREATOR, COLLECTION, "nope") is ALLOWED
        assert require_creator(MEMBER, COLLECTION, "nope") == Denied("nope")

    def test_forbid_self_target_is_invalid_not_forbidden(self):
        decision = forbid_self_target(COLLECTION, CREATOR, "You cannot set rights for yourself")
        assert decision == Denied("You cannot set rights for yourself", kind=DenialKind.INVALID)
        assert forbid_self_target(COLLECTION, MEMBER, "x") is ALLOWED


class TestRaiseForDecision:
    def test_allowed_is_noop(self):
        raise_for_decision(ALLOWED)

    def test_forbidden_maps_to_403(self):
        with pytest.raises(ForbiddenError) as exc:
            raise_for_decision(Denied("denied"))
        assert exc.value.message == "denied"

    def test_invalid_maps_to_400(self):
        with pytest.raises(BadRequestError):
            raise_for_decision(Denied("bad", kind=DenialKind.INVALID))
