from fastapi import APIRouter, Request, Response, status
from fastapi.responses import RedirectResponse
from typing import List
import logging

from app.core.errors import ShortenerError
from app.schemas import URLCreateRequest, URLInfoResponse, ShortenResponse
from app.services.shortener import URLService
from app.utils.validators import validate_shorten_request

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> URLService:
    return request.app.state.service


@router.post("/shorten", response_model=ShortenResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(url_request: URLCreateRequest, request: Request):
    logger.info(f"Received request to shorten URL: {str(url_request.full_url)[:50]}")
    result = validate_shorten_request(url_request.full_url, url_request.custom_alias)
    if not result.is_valid:
        raise ShortenerError.validation_failure(result.errors)

    short_url = get_service(request).shorten_url(url_request.full_url, url_request.custom_alias)
    return ShortenResponse(short_url=short_url)


@router.get("/urls", response_model=List[URLInfoResponse], tags=["urls"])
def list_urls_endpoint(request: Request):
    logger.info("Fetching all URLs")
    return [URLInfoResponse(**u) for u in get_service(request).get_all_urls()]


@router.get("/{alias}", tags=["redirect"])
def redirect_to_url_endpoint(alias: str, request: Request):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    logger.info(f"Redirecting alias: {alias}")
    full_url = get_service(request).get_full_url(alias)
    return RedirectResponse(url=full_url, status_code=status.HTTP_302_FOUND)


@router.delete("/{alias}", status_code=status.HTTP_204_NO_CONTENT)
def delete_url_endpoint(alias: str, request: Request):
    logger.info(f"Deleting alias: {alias}")
    get_service(request).delete_url(alias)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
