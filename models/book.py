from pydantic import BaseModel, ConfigDict

from models.author import Author
from models.genre import Genre


class NewBook(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    isbn: str | None = None
    publisher: str
    genre: Genre
    publish_year: int | None = None
    author_name: str
    author_nationality: str | None = None


class Book(NewBook):
    book_key: str

    @classmethod
    def from_new_book(cls, book_key: str, new_book: NewBook) -> "Book":
        return cls(book_key=book_key, **new_book.model_dump())

    @property
    def author(self) -> Author:
        return Author(name=self.author_name, nationality=self.author_nationality)
