from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from shared.api import Envelope, ok, ok_list

from .schemas import BookPayload, BookResponse, StockUpdate
from .service import BookService

router = APIRouter(tags=["Books"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)


def get_book_service(request: Request) -> BookService:
    return request.app.state.book_service


@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"success": True, "service": "books", "status": "running"}


@router.get("", response_model=Envelope[list[BookResponse]], response_model_exclude_none=True)
async def list_books(
    category: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    service: BookService = Depends(get_book_service),
):
    books = service.list_books(category=category, search=search)
    return ok_list([BookResponse.model_validate(b) for b in books])


@router.get("/{book_id}", response_model=Envelope[BookResponse], response_model_exclude_none=True)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    return ok(BookResponse.model_validate(service.get_book(book_id)))


@router.post(
    "",
    response_model=Envelope[BookResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(payload: BookPayload, service: BookService = Depends(get_book_service)):
    book = service.create_book(payload.model_dump())
    return ok(BookResponse.model_validate(book))


@router.put("/{book_id}", response_model=Envelope[BookResponse], response_model_exclude_none=True)
async def update_book(book_id: str, payload: BookPayload, service: BookService = Depends(get_book_service)):
    book = service.update_book(book_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    return ok(BookResponse.model_validate(book))


@router.delete("/{book_id}", response_model=Envelope[BookResponse], response_model_exclude_none=True)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    service.delete_book(book_id)
    return ok(message="Book deleted successfully")


@router.patch("/{book_id}/stock", response_model=Envelope[BookResponse], response_model_exclude_none=True)
async def update_stock(book_id: str, payload: StockUpdate, service: BookService = Depends(get_book_service)):
    book = service.update_stock(book_id, payload.quantity)
    return ok(BookResponse.model_validate(book))
