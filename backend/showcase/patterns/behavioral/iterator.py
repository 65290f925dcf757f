"""
Iterator: walk a collection without exposing how it is stored.

Collections implement ``__iter__`` so they work with ``for`` loops; the
user collection also offers reverse and filtered iterators.
"""

from dataclasses import dataclass
from typing import Iterator, List


class BookShelf:
    def __init__(self):
        self._books: List[str] = []

    def add_book(self, book: str) -> None:
        self._books.append(book)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[str]:
        return BookIterator(self._books)


class BookIterator:
    def __init__(self, books: List[str]):
        self._books = books
        self._index = 0

    def __iter__(self) -> "BookIterator":
        return self

    def __next__(self) -> str:
        if self._index >= len(self._books):
            raise StopIteration
        book = self._books[self._index]
        self._index += 1
        return book


@dataclass
class User:
    name: str
    age: int


class UserCollection:
    def __init__(self, users: List[User] = None):
        self._users: List[User] = list(users or [])

    def add(self, user: User) -> None:
        self._users.append(user)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def reverse_iterator(self) -> Iterator[User]:
        for index in range(len(self._users) - 1, -1, -1):
            yield self._users[index]

    def filtered_iterator(self, min_age: int) -> Iterator[User]:
        return (user for user in self._users if user.age >= min_age)


def demo() -> List[str]:
    shelf = BookShelf()
    for title in ("Design Patterns", "Clean Code", "Refactoring"):
        shelf.add_book(title)

    users = UserCollection(
        [User("Alice", 25), User("Bob", 17), User("Charlie", 30), User("Diana", 16)]
    )
    return [
        "Iterator:",
        "  books: " + ", ".join(shelf),
        "  forward: " + ", ".join(u.name for u in users),
        "  reverse: " + ", ".join(u.name for u in users.reverse_iterator()),
        "  adults: " + ", ".join(u.name for u in users.filtered_iterator(18)),
    ]
