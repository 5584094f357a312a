"""In-memory collaborators used by the HTTP tests."""

from datetime import datetime

from genealogy.modules.accounts import Account
from genealogy.modules.individuals import Individual, IndividualFactory, Tree


class InMemoryIndividualRepository:
    def __init__(self, trees: list[Tree], individuals: list[Individual]) -> None:
        self._trees = {tree.name: tree for tree in trees}
        self._individuals = {(person.tree_id, person.xref): person for person in individuals}

    async def get_tree_by_name(self, name: str) -> Tree | None:
        return self._trees.get(name)

    async def get_individual(self, tree_id: int, xref: str) -> Individual | None:
        return self._individuals.get((tree_id, xref))


def individual_factory(trees: list[Tree], individuals: list[Individual]) -> IndividualFactory:
    return IndividualFactory(InMemoryIndividualRepository(trees, individuals))


class InMemoryAccountRepository:
    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}
        self.last_logins: dict[str, datetime] = {}

    async def get_by_id(self, account_id: str) -> Account | None:
        return self.accounts.get(account_id)

    async def get_by_username(self, username: str) -> Account | None:
        for account in self.accounts.values():
            if account.username == username:
                return account
        return None

    async def create_account(self, *, username, password_hash, role, real_name, email, is_active) -> Account:
        account = Account(
            id=f"id-{len(self.accounts) + 1}",
            username=username,
            role=role,
            is_active=is_active,
            password_hash=password_hash,
            real_name=real_name,
            email=email,
        )
        self.accounts[account.id] = account
        return account

    async def set_last_login(self, account_id: str, timestamp: datetime) -> None:
        self.last_logins[account_id] = timestamp

    async def set_password_hash(self, account_id: str, password_hash: str) -> None:
        self.accounts[account_id].password_hash = password_hash
