import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from rinha.models.person import Person
from rinha.models.person_model import PersonIn, PersonOut


def test_new_person_gets_fresh_id():
    a = Person.new("Ana", "ana", date(1985, 9, 23))
    b = Person.new("Ana", "ana", date(1985, 9, 23))
    assert a.id != b.id


def test_to_document_uses_internal_names():
    person = Person.new("José", "josé", date(2000, 10, 1), ["Node"])

    doc = person.to_document()

    assert doc == {
        "_id": str(person.id),
        "name": "José",
        "nickname": "josé",
        "birth_date": "2000-10-01",
        "stacks": ["Node"],
    }


@pytest.mark.parametrize("stacks", [None, [], ["Rust"]])
def test_document_round_trip_keeps_stacks(stacks):
    person = Person.new("José", "josé", date(2000, 10, 1), stacks)
    assert Person.from_document(person.to_document()) == person


def test_person_in_reads_external_names():
    payload = PersonIn.model_validate(
        {"nome": "Ana", "apelido": "ana", "nascimento": "1985-09-23"}
    )

    assert payload.name == "Ana"
    assert payload.nickname == "ana"
    assert payload.birth_date == date(1985, 9, 23)
    assert payload.stacks is None


def test_person_in_rejects_internal_names():
    with pytest.raises(ValidationError):
        PersonIn.model_validate(
            {"name": "Ana", "nickname": "ana", "birth_date": "1985-09-23"}
        )


@pytest.mark.parametrize("value", ["1985-09-23T00:00:00", "1985/09/23", 496195200, ""])
def test_person_in_rejects_non_iso_dates(value):
    with pytest.raises(ValidationError):
        PersonIn.model_validate({"nome": "Ana", "apelido": "ana", "nascimento": value})


def test_person_out_serializes_external_names():
    person = Person(id=uuid.UUID(int=1), name="Ana", nickname="ana",
                    birth_date=date(1985, 9, 23), stacks=None)

    out = PersonOut.from_person(person).model_dump(mode="json", by_alias=True)

    assert out == {
        "id": "00000000-0000-0000-0000-000000000001",
        "apelido": "ana",
        "nome": "Ana",
        "nascimento": "1985-09-23",
        "stack": None,
    }
