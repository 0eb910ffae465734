import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from rinha.models.person_model import PersonIn, PersonOut
from rinha.repositories.mongo_repository import MongoRepository
from rinha.services.people_service import PeopleService

router = APIRouter(tags=["Pessoas"])
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error"


def get_people_service(request: Request) -> PeopleService:
    """Arma el servicio sobre el handle de Mongo guardado en app.state."""
    return PeopleService(MongoRepository(request.app.state.database))


# ===============================================
# 👤 Pessoas
# ===============================================

@router.post("/pessoas", response_model=PersonOut, status_code=201)
def create_person(payload: PersonIn, response: Response,
                  svc: PeopleService = Depends(get_people_service)):
    try:
        person = svc.create(payload)
    except PyMongoError:
        logger.exception("❌ Error insertando persona en MongoDB")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    response.headers["Location"] = f"/pessoas/{person.id}"
    return PersonOut.from_person(person)


@router.get("/pessoas/{person_id}", response_model=PersonOut)
def get_person(person_id: uuid.UUID, svc: PeopleService = Depends(get_people_service)):
    try:
        person = svc.get(person_id)
    except PyMongoError:
        logger.exception(f"❌ Error buscando persona {person_id} en MongoDB")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if not person:
        raise HTTPException(status_code=404, detail="Pessoa não encontrada")
    return PersonOut.from_person(person)


@router.get("/pessoas", response_model=List[PersonOut])
def search_persons(
    t: str = Query(..., min_length=1, description="Termo buscado em nome, apelido e stack"),
    svc: PeopleService = Depends(get_people_service),
):
    """
    Busca personas cuyo nome, apelido o algún elemento de stack contenga el
    término (sin distinguir mayúsculas). Sin límite ni orden definido.
    """
    try:
        found = svc.search(t)
    except PyMongoError:
        logger.exception(f"❌ Error buscando personas con t={t!r}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    return [PersonOut.from_person(p) for p in found]


@router.get("/contagem-pessoas", response_class=PlainTextResponse)
def count_persons(svc: PeopleService = Depends(get_people_service)):
    try:
        total = svc.count()
    except PyMongoError:
        logger.exception("❌ Error contando personas")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    return PlainTextResponse(str(total))
