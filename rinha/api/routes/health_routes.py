from fastapi import APIRouter, Response

router = APIRouter(tags=["Health"])


@router.get("/health-check")
def health_check():
    # sólo indica que el proceso vive; no toca Mongo
    return Response(status_code=200)
