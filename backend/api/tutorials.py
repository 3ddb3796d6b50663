"""
Tutorials API endpoints
"""
from fastapi import APIRouter, Depends, Response
from typing import List, Optional
import logging

from constants import HTTPStatus, TutorialFilters
from dependencies import get_tutorial_service
from dtos.request import TutorialRequest
from dtos.response import TutorialResponse
from services.interfaces import ITutorialService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_RESPONSES = {
    HTTPStatus.OK: {"description": "Tutorials found"},
    HTTPStatus.NO_CONTENT: {"description": "No tutorials match"},
    HTTPStatus.INTERNAL_SERVER_ERROR: {"description": "Lookup failed (empty body)"},
}


def select_tutorials(
    service: ITutorialService,
    title: Optional[str],
    published: Optional[bool]
) -> list:
    """
    Pick the service query for the listing parameters.

    Order of precedence:
    1. published and title  -> title match restricted to that published flag
    2. published only       -> published flag
    3. no/empty title       -> everything
    4. title == "published" -> published tutorials (legacy keyword, any case)
    5. any other title      -> title match
    """
    if published is not None:
        if title:
            return service.find_by_title_containing_and_published(title, published)
        return service.find_by_published(published)

    if not title:
        return service.find_all()

    if title.lower() == TutorialFilters.PUBLISHED_KEYWORD:
        return service.find_by_published(True)

    return service.find_by_title_containing(title)


def list_response(operation_name: str, fetch):
    """
    Run a listing query and map the outcome to a response.

    Non-empty results are returned as-is (200); empty results give 204 and any
    failure gives 500, both without a body.
    """
    try:
        tutorials = fetch()
    except Exception as e:
        logger.error(f"{operation_name} failed: {e}", exc_info=True)
        return Response(status_code=HTTPStatus.INTERNAL_SERVER_ERROR)

    if not tutorials:
        return Response(status_code=HTTPStatus.NO_CONTENT)

    return tutorials


@router.get("/tutorials", response_model=List[TutorialResponse], responses=LIST_RESPONSES)
def get_all_tutorials(
    title: Optional[str] = None,
    published: Optional[bool] = None,
    tutorial_service: ITutorialService = Depends(get_tutorial_service)
):
    """
    List tutorials, optionally filtered

    Args:
        title: Case-insensitive title fragment. The value "published" lists
            published tutorials instead of matching titles.
        published: Restrict to published (true) or draft (false) tutorials

    Returns:
        Matching tutorials (200), or an empty 204 when nothing matches
    """
    return list_response(
        "Tutorial listing",
        lambda: select_tutorials(tutorial_service, title, published)
    )


@router.get("/tutorials/published", response_model=List[TutorialResponse], responses=LIST_RESPONSES)
def get_published_tutorials(tutorial_service: ITutorialService = Depends(get_tutorial_service)):
    """List published tutorials (200), or an empty 204 when there are none"""
    return list_response(
        "Published tutorial listing",
        lambda: tutorial_service.find_by_published(True)
    )


@router.get("/tutorials/{tutorial_id}", response_model=TutorialResponse)
@handle_api_errors("Tutorial lookup")
def get_tutorial(tutorial_id: int, tutorial_service: ITutorialService = Depends(get_tutorial_service)):
    """
    Get a tutorial by ID

    Raises:
        HTTPException: 404 if the tutorial does not exist
    """
    return tutorial_service.find_by_id(tutorial_id)


@router.post("/tutorials", response_model=TutorialResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Tutorial creation")
def create_tutorial(
    request: TutorialRequest,
    tutorial_service: ITutorialService = Depends(get_tutorial_service)
):
    """
    Create a tutorial

    Returns:
        The stored tutorial including its assigned ID
    """
    return tutorial_service.create(request)


@router.put("/tutorials/{tutorial_id}", response_model=TutorialResponse)
@handle_api_errors("Tutorial update")
def update_tutorial(
    tutorial_id: int,
    request: TutorialRequest,
    tutorial_service: ITutorialService = Depends(get_tutorial_service)
):
    """
    Replace a tutorial's title, description and published flag

    Raises:
        HTTPException: 404 if the tutorial does not exist
    """
    return tutorial_service.update(tutorial_id, request)


@router.delete("/tutorials/{tutorial_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Tutorial deletion")
def delete_tutorial(tutorial_id: int, tutorial_service: ITutorialService = Depends(get_tutorial_service)):
    """Delete a tutorial; 404 if it does not exist"""
    tutorial_service.delete(tutorial_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete("/tutorials", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Tutorial bulk deletion")
def delete_all_tutorials(tutorial_service: ITutorialService = Depends(get_tutorial_service)):
    """Delete every tutorial"""
    deleted = tutorial_service.delete_all()
    logger.info(f"Bulk delete removed {deleted} tutorial(s)")
    return Response(status_code=HTTPStatus.NO_CONTENT)
