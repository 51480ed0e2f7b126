import pytest

from bindshift.core import api as core_api
from bindshift.core.errors import BindingResult
from bindshift.core.registry import ValidatorRegistry
from tests.helpers._samples import Sample, build_registry, sample_validator


@pytest.fixture
def fresh_default_registry(monkeypatch) -> ValidatorRegistry:
    registry = ValidatorRegistry()
    monkeypatch.setattr(core_api, "_registry", registry)
    return registry


def test_validate_returns_binding_result_named_after_type() -> None:
    result = core_api.validate(Sample("not ok", 15), registry=build_registry())

    assert result.object_name == "sample"
    assert result.messages() == ["f2 got 15, expected 10 or less"]


def test_validate_appends_to_supplied_sink() -> None:
    sink = BindingResult(object_name="form")
    sink.add_global_error("invalid", "earlier")

    returned = core_api.validate(Sample("not ok", 15), registry=build_registry(), sink=sink)

    assert returned is sink
    assert sink.error_count == 2


def test_default_registry_functions(fresh_default_registry: ValidatorRegistry) -> None:
    core_api.register_validator(Sample, sample_validator, name="demo")

    assert core_api.get_validator(Sample) is sample_validator
    assert core_api.list_validated_types() == ["demo"]
    assert core_api.default_registry() is fresh_default_registry
    assert core_api.validate(Sample("ok", 5), object_name="demo").to_dict() == {
        "object_name": "demo",
        "valid": True,
        "errors": [],
    }


def test_error_code_can_come_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("BINDSHIFT_ERROR_CODE", "constraint_violation")

    result = core_api.validate(Sample("not ok", 15), registry=build_registry())

    assert result.all_errors[0].code == "constraint_violation"


def test_blank_environment_error_code_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("BINDSHIFT_ERROR_CODE", "   ")

    result = core_api.validate(Sample("not ok", 15), registry=build_registry())

    assert result.all_errors[0].code == "invalid"
