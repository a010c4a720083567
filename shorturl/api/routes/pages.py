"""Homepage and sample API endpoint."""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from shorturl.api import schemas
from shorturl.core.config import settings

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def homepage():
    return FileResponse(settings.VIEWS_DIR / "index.html")


@router.get("/api/hello", response_model=schemas.GreetingResponse)
async def hello():
    return schemas.GreetingResponse(greeting="hello API")
