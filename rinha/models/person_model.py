import re
import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from rinha.models.person import Person

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# Payload de creación (nombres externos en portugués)
class PersonIn(BaseModel):
    name: StrictStr = Field(alias="nome", min_length=1)
    nickname: StrictStr = Field(alias="apelido", min_length=1)
    birth_date: date = Field(alias="nascimento")
    stacks: Optional[List[StrictStr]] = Field(default=None, alias="stack")

    @field_validator("birth_date", mode="before")
    @classmethod
    def _iso_date_only(cls, value):
        # sólo aceptamos "YYYY-MM-DD"; nada de timestamps ni fechas con hora
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not DATE_PATTERN.match(value):
            raise ValueError("nascimento must be a date in YYYY-MM-DD format")
        return value


# Respuesta al cliente
class PersonOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    nickname: str = Field(alias="apelido")
    name: str = Field(alias="nome")
    birth_date: date = Field(alias="nascimento")
    stacks: Optional[List[str]] = Field(default=None, alias="stack")

    @classmethod
    def from_person(cls, person: Person) -> "PersonOut":
        return cls(
            id=person.id,
            nickname=person.nickname,
            name=person.name,
            birth_date=person.birth_date,
            stacks=person.stacks,
        )
