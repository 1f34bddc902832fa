from __future__ import annotations

from dataclasses import dataclass

from ..domain import add_user, delete_user
from .context import ServiceContext


@dataclass(slots=True)
class UserService:
    context: ServiceContext

    def list_users(self) -> list[str]:
        return list(self.context.engine.document.users)

    async def add_user(self, name: str) -> list[str]:
        document = await self.context.engine.run_transaction(
            lambda doc: add_user(doc, name),
            action=f"add user {name!r}",
        )
        return list(document.users)

    async def delete_user(self, name: str) -> list[str]:
        """Remove ``name`` and unassign it from every event.

        Callers are expected to have confirmed the deletion with the user.
        """

        document = await self.context.engine.run_transaction(
            lambda doc: delete_user(doc, name),
            action=f"delete user {name!r}",
        )
        return list(document.users)
