import logging
import re
import uuid
from typing import Any, Dict, List, Optional

from rinha.models.person import Person
from rinha.models.person_model import PersonIn
from rinha.repositories.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "nickname", "stacks")


def build_search_query(term: str) -> Dict[str, Any]:
    """
    Arma el $or de búsqueda: substring case-insensitive sobre nombre, apodo
    o cualquier elemento de stacks (Mongo aplica $regex a cada elemento del array).
    El término se escapa, así que se busca literal.
    """
    pattern = re.escape(term)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in SEARCH_FIELDS
        ]
    }


class PeopleService:
    def __init__(self, repo: MongoRepository):
        self.repo = repo

    # ==============================================
    # 👤 Personas
    # ==============================================

    def create(self, payload: PersonIn) -> Person:
        person = Person.new(
            name=payload.name,
            nickname=payload.nickname,
            birth_date=payload.birth_date,
            stacks=payload.stacks,
        )
        self.repo.create(person.to_document())
        logger.debug(f"Persona creada: {person.id}")
        return person

    def get(self, person_id: uuid.UUID) -> Optional[Person]:
        doc = self.repo.find_one(str(person_id))
        return Person.from_document(doc) if doc else None

    def search(self, term: str) -> List[Person]:
        docs = self.repo.find(build_search_query(term))
        return [Person.from_document(d) for d in docs]

    def count(self) -> int:
        return self.repo.count()
