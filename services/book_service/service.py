from typing import Optional

import structlog

from shared.errors import NotFoundError, ValidationError

from .models import Book
from .repository import BookRepository

logger = structlog.get_logger(__name__)

BOOK_NOT_FOUND_MESSAGE = "Book not found"

SAMPLE_BOOKS = [
    dict(title="The Great Gatsby", author="F. Scott Fitzgerald", isbn="9780743273565", price=12.99,
         category="Fiction", stock=50, description="A classic American novel about the Jazz Age"),
    dict(title="To Kill a Mockingbird", author="Harper Lee", isbn="9780061120084", price=14.99,
         category="Fiction", stock=30, description="A gripping tale of racial injustice and childhood innocence"),
    dict(title="Clean Code", author="Robert C. Martin", isbn="9780132350884", price=45.99,
         category="Technology", stock=25, description="A handbook of agile software craftsmanship"),
    dict(title="JavaScript: The Good Parts", author="Douglas Crockford", isbn="9780596517748", price=29.99,
         category="Technology", stock=40, description="Unearthing the excellence in JavaScript"),
]


class BookService:

    def __init__(self, repository: Optional[BookRepository] = None):
        self.repository = repository if repository is not None else BookRepository()

    def _get_or_raise(self, book_id: str) -> Book:
        book = self.repository.get_book_by_id(book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND_MESSAGE)
        return book

    def list_books(self, category: Optional[str] = None, search: Optional[str] = None) -> list[Book]:
        if search:
            return self.repository.search_books(search)
        if category:
            return self.repository.get_books_by_category(category)
        return self.repository.get_all_books()

    def get_book(self, book_id: str) -> Book:
        return self._get_or_raise(book_id)

    def create_book(self, data: dict) -> Book:
        if not all(data.get(key) for key in ("title", "author", "isbn", "price")):
            raise ValidationError("Title, author, ISBN, and price are required")

        book = Book(
            title=data["title"],
            author=data["author"],
            isbn=data["isbn"],
            price=data["price"],
            category=data.get("category") or "",
            stock=data.get("stock") or 0,
            description=data.get("description") or "",
        )
        self.repository.insert(book)
        logger.info("book_created", book_id=book.id, isbn=book.isbn)
        return book

    def update_book(self, book_id: str, changes: dict) -> Book:
        with self.repository.lock:
            book = self._get_or_raise(book_id)
            book.update(changes)
        logger.info("book_updated", book_id=book_id, fields=sorted(changes))
        return book

    def delete_book(self, book_id: str) -> Book:
        book = self.repository.remove_by_id(book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND_MESSAGE)
        logger.info("book_deleted", book_id=book_id)
        return book

    def update_stock(self, book_id: str, quantity: Optional[int]) -> Book:
        if quantity is None:
            raise ValidationError("Quantity is required")
        with self.repository.lock:
            book = self._get_or_raise(book_id)
            book.adjust_stock(quantity)
        logger.info("book_stock_updated", book_id=book_id, delta=quantity, stock=book.stock)
        return book

    def seed_sample_books(self) -> list[Book]:
        seeded = [self.repository.insert(Book(**data)) for data in SAMPLE_BOOKS]
        logger.info("sample_books_seeded", count=len(seeded))
        return seeded
