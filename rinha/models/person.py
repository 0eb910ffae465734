# rinha/models/person.py
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Person(BaseModel):
    """Registro de persona tal como vive en la colección (nombres internos)."""

    id: uuid.UUID
    name: str
    nickname: str
    birth_date: date
    stacks: Optional[List[str]] = None  # None y [] son distintos

    @classmethod
    def new(cls, name: str, nickname: str, birth_date: date,
            stacks: Optional[List[str]] = None) -> "Person":
        return cls(id=uuid.uuid4(), name=name, nickname=nickname,
                   birth_date=birth_date, stacks=stacks)

    def to_document(self) -> Dict[str, Any]:
        # Mongo no guarda datetime.date: la fecha va como "YYYY-MM-DD"
        return {
            "_id": str(self.id),
            "name": self.name,
            "nickname": self.nickname,
            "birth_date": self.birth_date.isoformat(),
            "stacks": list(self.stacks) if self.stacks is not None else None,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Person":
        return cls(
            id=doc["_id"],
            name=doc["name"],
            nickname=doc["nickname"],
            birth_date=doc["birth_date"],
            stacks=doc.get("stacks"),
        )
