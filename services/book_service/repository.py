from typing import Optional

from shared.storage.record_store import RecordStore

from .models import Book


class BookRepository(RecordStore[Book]):

    def get_book_by_id(self, book_id: str) -> Optional[Book]:
        return self.find(book_id)

    def get_all_books(self) -> list[Book]:
        return self.all()

    def get_books_by_category(self, category: str) -> list[Book]:
        category = category.lower()
        return self.filter(lambda book: category in book.category.lower())

    def search_books(self, query: str) -> list[Book]:
        return self.filter(lambda book: book.matches(query))
