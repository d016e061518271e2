"""
Canned example buffers, one per dialect.
"""

from __future__ import annotations

from pyplayground._types import Dialect

TYPED_MARKER = "# Try some typed Python code!"
UNTYPED_MARKER = "# Try some Python code!"

TYPED_EXAMPLE = f'''{TYPED_MARKER}
# Annotations are checked strictly before the code runs.

from dataclasses import dataclass
from typing import Callable


@dataclass
class User:
    name: str
    age: int

    def greet(self) -> str:
        return f"Hello, I'm {{self.name}}"


user = User(name="Alice", age=30)
console.log("User:", user)
console.log(user.greet())


# Test closures
def create_counter() -> tuple[Callable[[], int], Callable[[], int]]:
    count = 0

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    def value() -> int:
        return count

    return increment, value


increment, value = create_counter()
console.log("Count:", increment())
console.log("Count:", increment())
console.log("Count:", value())
'''

UNTYPED_EXAMPLE = f'''{UNTYPED_MARKER}
# Nothing is checked ahead of time: errors show up when the code runs.

class User:
    def __init__(self, name, age):
        self.name = name
        self.age = age

    def greet(self):
        return f"Hello, I'm {{self.name}}"


user = User("Alice", 30)
console.log("User:", user)
console.log(user.greet())


# Test closures
def create_counter():
    count = 0

    def increment():
        nonlocal count
        count += 1
        return count

    def value():
        return count

    return increment, value


increment, value = create_counter()
console.log("Count:", increment())
console.log("Count:", increment())
console.log("Count:", value())


# Test bound methods
class Person:
    def __init__(self, name):
        self.name = name

    def greet(self):
        console.log("Hello, I'm " + self.name)


greet = Person("Bob").greet
greet()
'''

EXAMPLES: dict[Dialect, str] = {
    Dialect.TYPED: TYPED_EXAMPLE,
    Dialect.UNTYPED: UNTYPED_EXAMPLE,
}


def is_example_code(code: str) -> bool:
    """True when the buffer still starts with one of the canned examples' markers."""
    stripped = code.strip()
    return stripped.startswith(TYPED_MARKER) or stripped.startswith(UNTYPED_MARKER)
