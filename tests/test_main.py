import asyncio
import unittest

from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from repositories.repository_books import BookRepository
from services.service_books import BookCatalog


class TestGraphQLEndpoint(unittest.TestCase):
    def setUp(self):
        self.catalog = BookCatalog(BookRepository.seeded())
        self.settings = Settings(GRAPHQL_PATH="/graphql", GRAPHQL_IDE=None)
        self.client = TestClient(create_app(self.settings, self.catalog))

    def post(self, query):
        response = self.client.post("/graphql", json={"query": query})
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_count_books(self):
        self.assertEqual(self.post("{ getBooksCount }"), {"data": {"getBooksCount": 2}})

    def test_mutation_uses_injected_catalog(self):
        body = self.post('mutation { addBook(title: "Dune", publisher: "Ace", genre: FANTASY, '
                         'authorName: "Frank Herbert") { id title } }')

        self.assertEqual(body["data"]["addBook"]["title"], "Dune")
        self.assertEqual(asyncio.run(self.catalog.count()), 3)
        self.assertEqual(self.post("{ getBooksCount }"), {"data": {"getBooksCount": 3}})

    def test_validation_error_is_reported(self):
        response = self.client.post("/graphql", json={"query": "{ getBook(id: 1) { title } }"})

        self.assertIn("errors", response.json())
        self.assertEqual(asyncio.run(self.catalog.count()), 2)

    def test_apps_do_not_share_state(self):
        other = TestClient(create_app(self.settings))
        self.post('mutation { addBook(title: "Dune", publisher: "Ace", genre: FANTASY, '
                  'authorName: "Frank Herbert") { id } }')

        response = other.post("/graphql", json={"query": "{ getBooksCount }"})

        self.assertEqual(response.json(), {"data": {"getBooksCount": 2}})


if __name__ == "__main__":
    unittest.main()
