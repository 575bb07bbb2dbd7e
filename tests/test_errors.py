"""Tests for the error taxonomy and report models."""

from ocpp_model import (
    InvalidEntityError,
    OCPPModelError,
    PropertyConstraintError,
    ValidationReport,
    Violation,
)
from ocpp_model.report import field_path, reason_for
from ocpp_model.v201 import EVSE


class TestPropertyConstraintError:
    def test_is_value_error(self):
        error = PropertyConstraintError("name", "x" * 51, "must be at most 50 characters (got 51)")
        assert isinstance(error, ValueError)
        assert isinstance(error, OCPPModelError)
        assert str(error) == "name must be at most 50 characters (got 51)"

    def test_to_dict(self):
        error = PropertyConstraintError("id", -1, "must be at least 0 (got -1)")
        assert error.to_dict() == {
            "code": "ocpp:model/property_constraint",
            "message": "id must be at least 0 (got -1)",
            "details": {"field": "id", "value": "-1", "reason": "must be at least 0 (got -1)"},
        }


class TestInvalidEntityError:
    def test_message_joins_violations(self):
        report = ValidationReport(
            entity="ChargingSchedulePeriod",
            violations=[
                Violation(field="start_period", reason="is required"),
                Violation(field="limit", reason="is required"),
            ],
        )
        error = InvalidEntityError("ChargingSchedulePeriod", report)

        assert error.code == "ocpp:model/invalid_entity"
        assert str(error) == (
            "ChargingSchedulePeriod is invalid: start_period is required; limit is required"
        )
        assert error.details == {"entity": "ChargingSchedulePeriod", "violations": 2}


class TestReport:
    def test_json_dump_of_entity_value(self):
        violation = Violation(field="evse", value=EVSE(1), reason="is invalid")
        dumped = violation.model_dump(mode="json")
        assert dumped["value"].startswith("EVSE(")
        assert violation.message == "evse is invalid"

    def test_scalar_value_dumped_as_is(self):
        assert Violation(field="id", value=-1, reason="x").model_dump(mode="json")["value"] == -1

    def test_field_path_renders_nesting(self):
        assert field_path(("charging_schedule_period", 1, "limit")) == (
            "charging_schedule_period[1].limit"
        )
        assert field_path(("evse", "id")) == "evse.id"

    def test_reason_for_none_input(self):
        error = {"type": "int_type", "input": None, "msg": "Input should be a valid integer"}
        assert reason_for(error) == "is required"

    def test_reason_for_generic_input_error(self):
        error = {"type": "int_type", "input": "3", "msg": "Input should be a valid integer"}
        assert reason_for(error) == "must be a valid integer"

    def test_reason_for_long_string(self):
        error = {
            "type": "string_too_long",
            "input": "x" * 51,
            "msg": "String should have at most 50 characters",
            "ctx": {"max_length": 50},
        }
        assert reason_for(error) == "must be at most 50 characters (got 51)"
