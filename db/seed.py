from typing import List

from models.book import Book
from models.genre import Genre

SEED_BOOKS: List[Book] = [
    Book(
        book_key="f40ab425-0a36-419f-8bc1-021a634e6571",
        title="The Awakening",
        description="The Awakening es una novela de la escritora estadounidense Kate Chopin.",
        publisher="W W Norton & Co Inc.",
        genre=Genre.NONE,
        publish_year=1899,
        author_name="Kate Chopin",
    ),
    Book(
        book_key="ccd0d64a-f802-4941-b6d8-0764ff29a232",
        title="City of Glass",
        description="Ciudad de Cristal es el tercer libro de la saga Cazadores de Sombras.",
        isbn="978-0140097313",
        publisher="Simon & Schuster",
        genre=Genre.FANTASY,
        publish_year=2009,
        author_name="Paul Auster",
        author_nationality="Estadounidense",
    ),
]
