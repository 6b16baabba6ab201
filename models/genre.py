from enum import Enum


class Genre(str, Enum):
    NONE = "NONE"
    FICTION = "FICTION"
    MYSTERY = "MYSTERY"
    FANTASY = "FANTASY"
    ROMANCE = "ROMANCE"
