"""
FastAPI Endpoints for the Redirect Service

This module defines the request router with minimal logic.
Endpoints only handle:
- Request parsing and validation at the boundary
- Error signalling (rendered as plain text by the app's exception handler)
- Delegating to service layer

Routing:
- REGISTER_PATH + DELETE: remove a mapping
- REGISTER_PATH + POST: create or overwrite a mapping
- REGISTER_PATH + any other method: render the admin page
- Any other path: redirect to the stored target
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.routing import APIRoute
from fastapi.templating import Jinja2Templates
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from redirector.core.exceptions import InvalidRequestError, MappingNotFoundError
from redirector.core.setting import settings
from redirector.core.validators import (
    ValidationFailure,
    parse_delete_key,
    parse_mapping_form,
)
from redirector.db.interface import KeyValueStore
from redirector.db.kv_store import get_store
from redirector.services.mapping_service import MappingService
from redirector.services.redirect_service import RedirectService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
# Every method other than POST and DELETE falls through to the admin page
LISTING_METHODS = [method for method in ALL_METHODS if method not in ("POST", "DELETE")]


class AnyMethodRoute(APIRoute):
    """
    APIRoute that accepts every HTTP method, including TRACE and
    non-standard verbs, once its path matches.

    `methods` still lists the common verbs; routes registered earlier for
    a specific method keep precedence because the router takes the first
    full match.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.delete(
    settings.REGISTER_PATH,
    response_class=PlainTextResponse,
    summary="Delete a redirect",
)
async def delete_redirect(
    request: Request,
    store: KeyValueStore = Depends(get_store)
) -> PlainTextResponse:
    """
    Delete the mapping named by the `key` query parameter.

    Deleting a path that has no mapping still succeeds.

    Raises:
        InvalidRequestError: If the key parameter is missing (400)
    """
    key = parse_delete_key(request.query_params)
    if isinstance(key, ValidationFailure):
        raise InvalidRequestError(key)

    await MappingService(store).delete_mapping(key)
    return PlainTextResponse("Redirect deleted successfully!", status_code=status.HTTP_200_OK)


@router.post(
    settings.REGISTER_PATH,
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a redirect",
)
async def create_redirect(
    request: Request,
    store: KeyValueStore = Depends(get_store)
) -> PlainTextResponse:
    """
    Create a mapping from form fields `shortPath` and `targetUrl`.

    An existing mapping for the same short path is overwritten.

    Raises:
        InvalidRequestError: If a field is missing or malformed (400)
    """
    form = await request.form()
    mapping = parse_mapping_form(form, reserved_paths=settings.reserved_paths)
    if isinstance(mapping, ValidationFailure):
        raise InvalidRequestError(mapping)

    await MappingService(store).create_mapping(mapping)
    return PlainTextResponse("Redirect created successfully!", status_code=status.HTTP_201_CREATED)


async def list_redirects(
    request: Request,
    store: KeyValueStore = Depends(get_store)
) -> HTMLResponse:
    """Render the creation form and the table of existing redirects."""
    mappings = await MappingService(store).list_mappings()
    return templates.TemplateResponse(
        request,
        "register.html",
        {
            "mappings": mappings,
            "register_path": settings.REGISTER_PATH,
        },
    )


async def redirect_to_target(
    request: Request,
    store: KeyValueStore = Depends(get_store)
) -> RedirectResponse:
    """
    Redirect to the target registered for the request path.

    Query parameters of the request are copied onto the target,
    replacing parameters of the same name.

    Raises:
        MappingNotFoundError: If no mapping exists for the path (404)
    """
    # Decoded path as received; request.url would re-parse an encoded "?" or "#"
    short_path = request.scope["path"]
    redirect_service = RedirectService(store)
    location = await redirect_service.get_redirect_url(
        short_path,
        request.query_params.multi_items()
    )

    if not location:
        raise MappingNotFoundError(short_path)

    return RedirectResponse(url=location, status_code=settings.REDIRECT_STATUS_CODE)


# Registered last and in this order: DELETE and POST on the register path
# win over the listing, and the listing wins over the catch-all redirect.
router.add_api_route(
    settings.REGISTER_PATH,
    list_redirects,
    methods=LISTING_METHODS,
    response_class=HTMLResponse,
    summary="Admin page",
    route_class_override=AnyMethodRoute,
)
router.add_api_route(
    "/{short_path:path}",
    redirect_to_target,
    methods=ALL_METHODS,
    summary="Redirect to target URL",
    route_class_override=AnyMethodRoute,
)
