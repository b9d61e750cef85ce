"""Item endpoints: /v1/item."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status

from arcade.api.deps import get_item_service
from arcade.api.schemas import ItemBody, ItemLocationBody, ItemRequest, ItemResponse, ItemsResponse
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
    ItemChange,
    ItemFilter,
    ItemLocation,
    LocationType,
)
from arcade.core.errors import BadRequestError
from arcade.services import ItemService

router = APIRouter(prefix="/v1/item", tags=["item"])


def item_filter(request: Request) -> ItemFilter:
    """Build an ItemFilter; a locationID needs a locationType to be meaningful."""
    owner_id = query_uuid(request, "ownerID")

    location: Optional[ItemLocation] = None
    location_id = query_uuid(request, "locationID")
    if location_id is not None:
        value = request.query_params.get("locationType")
        if value is None:
            raise BadRequestError("locationType required when locationID is set")
        try:
            location = ItemLocation(location_id, LocationType.parse(value))
        except ValueError:
            raise BadRequestError(f"invalid locationType query parameter: '{value}'") from None

    return ItemFilter(
        owner_id=owner_id,
        location=location,
        offset=query_offset(request),
        limit=query_limit(request, DEFAULT_FILTER_LIMIT, MAX_FILTER_LIMIT),
    )


def item_location(body: ItemLocationBody) -> ItemLocation:
    location_id = parse_uuid(body.id, "locationID.ID")
    try:
        location_type = LocationType.parse(body.type)
    except ValueError:
        raise BadRequestError(f"invalid locationID.Type: '{body.type}'") from None
    return ItemLocation(location_id, location_type)


def item_change(body: bytes) -> ItemChange:
    req = parse_body(ItemRequest, body)
    check_text(req.name, "item name", MAX_NAME_LEN)
    check_text(req.description, "item description", MAX_DESCRIPTION_LEN)
    return ItemChange(
        name=req.name,
        description=req.description,
        owner_id=parse_uuid(req.owner_id, "ownerID"),
        location=item_location(req.location_id),
    )


@router.get("", response_model=ItemsResponse)
def list_items(
    request: Request, service: ItemService = Depends(get_item_service)
) -> ItemsResponse:
    items = service.list(item_filter(request))
    return ItemsResponse(items=[ItemBody.from_entity(i) for i in items])


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: str, service: ItemService = Depends(get_item_service)) -> ItemResponse:
    item = service.get(parse_path_id(item_id, "item"))
    return ItemResponse(item=ItemBody.from_entity(item))


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    body: bytes = Depends(read_body),
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    item = service.create(item_change(body))
    return ItemResponse(item=ItemBody.from_entity(item))


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: str,
    body: bytes = Depends(read_body),
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    iid = parse_path_id(item_id, "item")
    item = service.update(iid, item_change(body))
    return ItemResponse(item=ItemBody.from_entity(item))


@router.delete("/{item_id}")
def remove_item(item_id: str, service: ItemService = Depends(get_item_service)) -> Response:
    service.remove(parse_path_id(item_id, "item"))
    return Response(status_code=status.HTTP_200_OK)
