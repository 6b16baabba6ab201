from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from services.service_books import BookCatalog


class GraphQLContext(BaseContext):
    def __init__(self, catalog: BookCatalog):
        super().__init__()
        self.catalog = catalog


def get_catalog(request: Request) -> BookCatalog:
    return request.app.state.catalog


async def get_context(catalog: BookCatalog = Depends(get_catalog)) -> GraphQLContext:
    return GraphQLContext(catalog)
