from typing import Protocol


class IPasswordEncoder(Protocol):
    """One-way password hashing used at sign-up and sign-in."""

    def hash_password(self, password: str) -> str: ...

    def verify(self, password: str, hashed_password: str) -> bool: ...
