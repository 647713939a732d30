from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from shared.api import Envelope, ok, ok_list

from .schemas import OrderCreate, OrderItemPayload, OrderResponse, OrderStats, StatusUpdate
from .service import OrderService

router = APIRouter(tags=["Orders"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def _to_response(order) -> OrderResponse:
    return OrderResponse.model_validate(order)


@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"success": True, "service": "orders", "status": "running"}


@router.get("", response_model=Envelope[list[OrderResponse]], response_model_exclude_none=True)
async def list_orders(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    order_status: Optional[str] = Query(default=None, alias="status"),
    service: OrderService = Depends(get_order_service),
):
    orders = service.list_orders(user_id=user_id, status=order_status)
    return ok_list([_to_response(o) for o in orders])


# Declared before /{order_id} so "stats" is not taken for an id
@router.get("/stats", response_model=Envelope[OrderStats], response_model_exclude_none=True)
async def get_order_stats(service: OrderService = Depends(get_order_service)):
    return ok(OrderStats(**service.get_stats()))


@router.get("/{order_id}", response_model=Envelope[OrderResponse], response_model_exclude_none=True)
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    return ok(_to_response(service.get_order(order_id)))


@router.post(
    "",
    response_model=Envelope[OrderResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(payload: OrderCreate, service: OrderService = Depends(get_order_service)):
    order = service.create_order(payload.user_id, payload.items)
    return ok(_to_response(order))


@router.patch("/{order_id}/status", response_model=Envelope[OrderResponse], response_model_exclude_none=True)
async def update_order_status(
    order_id: str,
    payload: StatusUpdate,
    service: OrderService = Depends(get_order_service),
):
    return ok(_to_response(service.update_status(order_id, payload.status)))


@router.post("/{order_id}/items", response_model=Envelope[OrderResponse], response_model_exclude_none=True)
async def add_item_to_order(
    order_id: str,
    item: OrderItemPayload,
    service: OrderService = Depends(get_order_service),
):
    order = service.add_item(order_id, item.book_id, item.quantity, item.unit_price)
    return ok(_to_response(order))


@router.delete("/{order_id}/items/{book_id}", response_model=Envelope[OrderResponse], response_model_exclude_none=True)
async def remove_item_from_order(
    order_id: str,
    book_id: str,
    service: OrderService = Depends(get_order_service),
):
    return ok(_to_response(service.remove_item(order_id, book_id)))


@router.delete("/{order_id}", response_model=Envelope[OrderResponse], response_model_exclude_none=True)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    service.delete_order(order_id)
    return ok(message="Order deleted successfully")
