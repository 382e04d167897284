import pytest

from teamdash.models import (
    COMPENSATION_MAX,
    COMPENSATION_MIN,
    AddPersonRequest,
    Person,
    ValidationError,
)


def make_person(**overrides):
    values = dict(
        uuid="0f1e2d3c4b5a69788796a5b4c3d2e1f0",
        name="Ada",
        title="Engineer",
        level="Senior",
        compensation=50_000,
        joined_date="2024-01-01 09:00:00 +00:00",
    )
    values.update(overrides)
    return Person(**values)


def test_person_round_trip_through_dict():
    person = make_person()
    person.validate()
    assert Person.from_dict(person.to_dict()) == person


def test_person_dict_uses_field_names():
    data = make_person().to_dict()
    assert set(data) == {"uuid", "name", "title", "level", "compensation", "joined_date"}
    assert data["compensation"] == 50_000


@pytest.mark.parametrize("field", ["name", "title", "level"])
def test_person_empty_text_field_is_rejected(field):
    person = make_person(**{field: ""})
    with pytest.raises(ValidationError) as info:
        person.validate()
    assert info.value.errors == {field: f"{field} is required"}


@pytest.mark.parametrize("amount", [COMPENSATION_MIN - 1, COMPENSATION_MAX + 1, 0, -5])
def test_person_compensation_out_of_range(amount):
    with pytest.raises(ValidationError) as info:
        make_person(compensation=amount).validate()
    assert list(info.value.errors) == ["compensation"]


@pytest.mark.parametrize("amount", [COMPENSATION_MIN, COMPENSATION_MAX])
def test_compensation_bounds_are_inclusive(amount):
    request = AddPersonRequest("Ada", "Engineer", "Senior", amount)
    request.validate()
    assert request.compensation == amount


def test_all_errors_reported_together():
    request = AddPersonRequest("", "", "", 1)
    with pytest.raises(ValidationError) as info:
        request.validate()
    assert list(info.value.errors) == ["name", "title", "level", "compensation"]
    assert isinstance(info.value, ValueError)


def test_add_person_request_round_trip():
    request = AddPersonRequest("Grace", "Manager", "Lead", 90_000)
    assert AddPersonRequest.from_dict(request.to_dict()) == request


def test_from_dict_missing_field():
    with pytest.raises(ValueError, match="compensation"):
        AddPersonRequest.from_dict({"name": "a", "title": "b", "level": "c"})


def test_from_dict_wrong_types():
    with pytest.raises(ValueError):
        AddPersonRequest.from_dict(
            {"name": "a", "title": "b", "level": "c", "compensation": "5000"}
        )
    with pytest.raises(ValueError):
        AddPersonRequest.from_dict(
            {"name": 1, "title": "b", "level": "c", "compensation": 5000}
        )
    with pytest.raises(ValueError):
        AddPersonRequest.from_dict(
            {"name": "a", "title": "b", "level": "c", "compensation": True}
        )


def test_from_dict_integer_overflow():
    with pytest.raises(ValueError):
        AddPersonRequest.from_dict(
            {"name": "a", "title": "b", "level": "c", "compensation": 2**31}
        )


def test_from_dict_ignores_unknown_keys():
    data = {"name": "a", "title": "b", "level": "c", "compensation": 3000, "extra": 1}
    assert AddPersonRequest.from_dict(data) == AddPersonRequest("a", "b", "c", 3000)