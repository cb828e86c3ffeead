from abc import ABC, abstractmethod

from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary around the user store.

    Use cases open it with ``async with``; changes are only kept if
    ``commit()`` runs before the block exits. Leaving the block discards
    anything uncommitted, including after an error.
    """

    users: IUserRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
