from datetime import datetime, timedelta

import pytest

from core.errors import ValidationFailure
from repositories.models import LabelModel, ProjectModel, TaskModel, next_timestamp, utcnow
from repositories.schema import ResourceSchema, validate_string_type


def _task(**overrides):
    now = utcnow()
    data = {
        "id": "t1",
        "title": "Write docs",
        "status": "pending",
        "assignedBy": "u1",
        "createdAt": now,
        "updatedAt": now,
    }
    data.update(overrides)
    return data


class TestValidateCreate:
    def test_populates_defaults(self):
        document = ResourceSchema(TaskModel).validate_create(_task())

        assert document["description"] == ""
        assert document["assignedTo"] == ""
        assert document["priority"] == "medium"
        assert document["labels"] == []
        assert document["dueDate"] is None
        assert document["projectId"] is None

    def test_timestamps_default_when_absent(self):
        data = _task()
        del data["createdAt"]
        del data["updatedAt"]

        document = ResourceSchema(TaskModel).validate_create(data)

        assert isinstance(document["createdAt"], datetime)
        assert isinstance(document["updatedAt"], datetime)

    def test_reports_every_missing_field(self):
        with pytest.raises(ValidationFailure) as exc_info:
            ResourceSchema(LabelModel).validate_create({"id": "l1"})

        message = exc_info.value.message
        assert "name" in message
        assert "color" in message
        assert "createdBy" in message
        assert len(exc_info.value.violations) == 3

    def test_rejects_unknown_enum_value(self):
        with pytest.raises(ValidationFailure) as exc_info:
            ResourceSchema(TaskModel).validate_create(_task(status="archived"))

        assert exc_info.value.violations[0].startswith("status")

    @pytest.mark.parametrize("value", [0, False, 12.5, ["x"]])
    def test_strings_are_strict(self, value):
        with pytest.raises(ValidationFailure):
            ResourceSchema(TaskModel).validate_create(_task(title=value))

    def test_empty_required_string_is_rejected(self):
        with pytest.raises(ValidationFailure):
            ResourceSchema(TaskModel).validate_create(_task(title=""))

    def test_unknown_keys_are_dropped(self):
        document = ResourceSchema(TaskModel).validate_create(_task(userId="u1", extra=1))

        assert "userId" not in document
        assert "extra" not in document

    def test_duplicate_team_members_are_rejected(self):
        now = utcnow()
        with pytest.raises(ValidationFailure):
            ResourceSchema(ProjectModel).validate_create(
                {
                    "id": "p1",
                    "title": "P",
                    "createdBy": "u1",
                    "teamMembers": ["u2", "u2"],
                    "createdAt": now,
                    "updatedAt": now,
                }
            )

    def test_updated_before_created_is_rejected(self):
        now = utcnow()
        with pytest.raises(ValidationFailure):
            ResourceSchema(TaskModel).validate_create(
                _task(createdAt=now, updatedAt=now - timedelta(seconds=1))
            )


class TestValidateUpdate:
    def test_returns_only_supplied_fields_and_updated_at(self):
        stamp = utcnow()

        changes = ResourceSchema(TaskModel).validate_update({"title": "New"}, stamp)

        assert changes == {"title": "New", "updatedAt": stamp}

    def test_required_fields_become_optional(self):
        changes = ResourceSchema(LabelModel).validate_update({}, utcnow())

        assert set(changes) == {"updatedAt"}

    def test_caller_updated_at_is_overridden(self):
        stamp = utcnow()
        earlier = stamp - timedelta(days=1)

        changes = ResourceSchema(TaskModel).validate_update({"updatedAt": earlier}, stamp)

        assert changes["updatedAt"] == stamp

    def test_immutable_fields_are_ignored(self):
        changes = ResourceSchema(TaskModel).validate_update(
            {"id": "other", "createdAt": utcnow(), "priority": "high"}, utcnow()
        )

        assert "id" not in changes
        assert "createdAt" not in changes
        assert changes["priority"] == "high"

    def test_unknown_fields_are_violations(self):
        with pytest.raises(ValidationFailure) as exc_info:
            ResourceSchema(TaskModel).validate_update({"colour": "red"}, utcnow())

        assert "colour: is not allowed" in exc_info.value.violations

    def test_constraints_still_apply(self):
        with pytest.raises(ValidationFailure) as exc_info:
            ResourceSchema(TaskModel).validate_update(
                {"status": "archived", "title": 5, "bogus": True}, utcnow()
            )

        assert len(exc_info.value.violations) == 3

    def test_null_for_non_nullable_field_is_rejected(self):
        with pytest.raises(ValidationFailure):
            ResourceSchema(TaskModel).validate_update({"title": None}, utcnow())


class TestValidateStringType:
    def test_accepts_strings_and_none(self):
        assert validate_string_type("a", values=[None, "b"])

    @pytest.mark.parametrize("value", [0, False, 1, []])
    def test_rejects_non_strings(self, value):
        with pytest.raises(ValidationFailure) as exc_info:
            validate_string_type(value, error_message="must be text")

        assert exc_info.value.message == "must be text"


def test_next_timestamp_strictly_increases():
    future = utcnow() + timedelta(hours=1)

    assert next_timestamp(future) > future
    assert next_timestamp(None) <= utcnow()
