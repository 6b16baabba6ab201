from typing import List
from uuid import uuid4

from exceptions.exceptions import ErrorBookCreation, ErrorBookRead
from models.book import Book, NewBook
from repositories.repository_books import BookRepository

from loguru import logger


class BookCatalog:
    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def count(self) -> int:
        try:
            count = await self.repository.count_books()
        except Exception as e:
            msg = f"Failed count books ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookRead(msg)
        logger.info(f"Catalog holds {count} books")
        return count

    async def list_all(self) -> List[Book]:
        try:
            books = await self.repository.read_all_books()
        except Exception as e:
            msg = f"Failed read all books ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookRead(msg)
        logger.info(f"Found {len(books)} books")
        return books

    async def get_by_id(self, book_key: str | None) -> Book | None:
        try:
            book = await self.repository.read_book_by_book_key(book_key)
        except Exception as e:
            msg = f"Failed read book with UUID {book_key} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookRead(msg)
        if book is None:
            logger.info(f"Book with UUID {book_key} not found")
        else:
            logger.info(f"Book with UUID {book_key} found")
        return book

    async def list_by_author_name(self, author_name: str | None) -> List[Book]:
        try:
            books = await self.repository.read_all_books_by_author_name(author_name)
        except Exception as e:
            msg = f"Failed read books by author {author_name} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookRead(msg)
        logger.info(f"Found {len(books)} books by author {author_name}")
        return books

    async def add_book(self, new_book: NewBook) -> Book:
        book = Book.from_new_book(str(uuid4()), new_book)
        try:
            await self.repository.create_book(book)
        except Exception as e:
            msg = f"Failed create book with details: {book} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookCreation(msg)
        logger.info(f"Book created with details: {book}")
        return book
