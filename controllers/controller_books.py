from typing import Annotated, Any, List, Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from controllers.context import GraphQLContext, get_context
from models.author import Author
from models.book import Book, NewBook
from models.genre import Genre

GenreType = strawberry.enum(Genre, name="Genre")


def _unset_to_none(value: Any) -> Any:
    return None if value is strawberry.UNSET else value


@strawberry.type(name="Author")
class AuthorType:
    name: Optional[str] = None
    nationality: Optional[str] = None

    @classmethod
    def from_model(cls, author: Author) -> "AuthorType":
        return cls(name=author.name, nationality=author.nationality)


@strawberry.type(name="Book")
class BookType:
    id: str
    title: str
    description: Optional[str]
    isbn: Optional[str]
    publisher: str
    genre: GenreType
    publish_year: Optional[int]
    book: strawberry.Private[Book]

    @strawberry.field
    def author(self) -> AuthorType:
        return AuthorType.from_model(self.book.author)

    @classmethod
    def from_model(cls, book: Book) -> "BookType":
        return cls(
            id=book.book_key,
            title=book.title,
            description=book.description,
            isbn=book.isbn,
            publisher=book.publisher,
            genre=book.genre,
            publish_year=book.publish_year,
            book=book,
        )


@strawberry.type
class Query:
    @strawberry.field
    async def get_books_count(self, info: Info[GraphQLContext, None]) -> int:
        return await info.context.catalog.count()

    @strawberry.field
    async def get_all_books(self, info: Info[GraphQLContext, None]) -> Optional[List[Optional[BookType]]]:
        books = await info.context.catalog.list_all()
        return [BookType.from_model(book) for book in books]

    @strawberry.field
    async def get_book(
        self,
        info: Info[GraphQLContext, None],
        book_key: Annotated[Optional[str], strawberry.argument(name="id")] = strawberry.UNSET,
    ) -> Optional[BookType]:
        book = await info.context.catalog.get_by_id(_unset_to_none(book_key))
        if book is None:
            return None
        return BookType.from_model(book)

    @strawberry.field
    async def get_all_books_by_author(
        self,
        info: Info[GraphQLContext, None],
        author_name: Optional[str] = strawberry.UNSET,
    ) -> Optional[List[Optional[BookType]]]:
        books = await info.context.catalog.list_by_author_name(_unset_to_none(author_name))
        return [BookType.from_model(book) for book in books]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_book(
        self,
        info: Info[GraphQLContext, None],
        *,
        title: str,
        description: Optional[str] = strawberry.UNSET,
        isbn: Optional[str] = strawberry.UNSET,
        publisher: str,
        genre: GenreType,
        publish_year: Optional[int] = strawberry.UNSET,
        author_name: str,
        author_nationality: Optional[str] = strawberry.UNSET,
    ) -> Optional[BookType]:
        book = await info.context.catalog.add_book(
            NewBook(
                title=title,
                description=_unset_to_none(description),
                isbn=_unset_to_none(isbn),
                publisher=publisher,
                genre=genre,
                publish_year=_unset_to_none(publish_year),
                author_name=author_name,
                author_nationality=_unset_to_none(author_nationality),
            )
        )
        return BookType.from_model(book)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(path: str = "/", graphql_ide: str | None = "graphiql") -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        path=path,
        context_getter=get_context,
        graphql_ide=graphql_ide or None,
    )
