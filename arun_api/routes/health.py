"""Health endpoint."""

from fastapi import APIRouter


router = APIRouter()


@router.get("/", summary="Health check")
def health() -> dict[str, str]:
    """Return basic health signal."""

    return {"status": "ok"}
