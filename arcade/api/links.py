"""Link endpoints: /v1/link."""

from fastapi import APIRouter, Depends, Request, Response, status

from arcade.api.deps import get_link_service
from arcade.api.schemas import LinkBody, LinkRequest, LinkResponse, LinksResponse
from arcade.api.validation import (
    check_text,
    parse_body,
    parse_path_id,
    parse_uuid,
    query_limit,
    query_offset,
    query_uuid,
    read_body,
)
from arcade.core.asset import (
    DEFAULT_FILTER_LIMIT,
    MAX_DESCRIPTION_LEN,
    MAX_FILTER_LIMIT,
    MAX_NAME_LEN,
    LinkChange,
    LinkFilter,
)
from arcade.services import LinkService

router = APIRouter(prefix="/v1/link", tags=["link"])


def link_filter(request: Request) -> LinkFilter:
    return LinkFilter(
        owner_id=query_uuid(request, "ownerID"),
        location_id=query_uuid(request, "locationID"),
        destination_id=query_uuid(request, "destinationID"),
        offset=query_offset(request),
        limit=query_limit(request, DEFAULT_FILTER_LIMIT, MAX_FILTER_LIMIT),
    )


def link_change(body: bytes) -> LinkChange:
    req = parse_body(LinkRequest, body)
    check_text(req.name, "link name", MAX_NAME_LEN)
    check_text(req.description, "link description", MAX_DESCRIPTION_LEN)
    return LinkChange(
        name=req.name,
        description=req.description,
        owner_id=parse_uuid(req.owner_id, "ownerID"),
        location_id=parse_uuid(req.location_id, "locationID"),
        destination_id=parse_uuid(req.destination_id, "destinationID"),
    )


@router.get("", response_model=LinksResponse)
def list_links(
    request: Request, service: LinkService = Depends(get_link_service)
) -> LinksResponse:
    links = service.list(link_filter(request))
    return LinksResponse(links=[LinkBody.from_entity(lk) for lk in links])


@router.get("/{link_id}", response_model=LinkResponse)
def get_link(link_id: str, service: LinkService = Depends(get_link_service)) -> LinkResponse:
    link = service.get(parse_path_id(link_id, "link"))
    return LinkResponse(link=LinkBody.from_entity(link))


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    body: bytes = Depends(read_body),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    link = service.create(link_change(body))
    return LinkResponse(link=LinkBody.from_entity(link))


@router.put("/{link_id}", response_model=LinkResponse)
def update_link(
    link_id: str,
    body: bytes = Depends(read_body),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    lid = parse_path_id(link_id, "link")
    link = service.update(lid, link_change(body))
    return LinkResponse(link=LinkBody.from_entity(link))


@router.delete("/{link_id}")
def remove_link(link_id: str, service: LinkService = Depends(get_link_service)) -> Response:
    service.remove(parse_path_id(link_id, "link"))
    return Response(status_code=status.HTTP_200_OK)
