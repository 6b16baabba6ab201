from threading import Lock
from typing import Iterable, List

from db.seed import SEED_BOOKS
from models.book import Book


class BookRepository:
    def __init__(self, books: Iterable[Book] = ()):
        self._books: List[Book] = list(books)
        self._lock = Lock()

    @classmethod
    def seeded(cls) -> "BookRepository":
        return cls(SEED_BOOKS)

    async def create_book(self, book: Book):
        with self._lock:
            self._books.append(book)

    async def read_book_by_book_key(self, book_key: str | None) -> Book | None:
        with self._lock:
            return next((book for book in self._books if book.book_key == book_key), None)

    async def read_all_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    async def read_all_books_by_author_name(self, author_name: str | None) -> List[Book]:
        with self._lock:
            return [book for book in self._books if book.author_name == author_name]

    async def count_books(self) -> int:
        with self._lock:
            return len(self._books)
