"""
Create the default administrator account used for the first sign-in.
"""
import asyncio

from genealogy.infrastructure.database import dispose_engine, get_session, init_db
from genealogy.modules.accounts import AccountCreateInput, AccountService, UsernameTakenError


async def create_default_admin():
    await init_db()

    async for db in get_session():
        service = AccountService.with_session(db)
        try:
            await service.create_account(
                AccountCreateInput(
                    username="admin",
                    password="admin123",
                    role="super_admin",
                    real_name="Administrator",
                    email="admin@example.com",
                )
            )
        except UsernameTakenError:
            print("The admin account already exists, nothing to do")
            break
        await db.commit()

        print("=" * 50)
        print("Default administrator created")
        print("=" * 50)
        print("Username: admin")
        print("Password: admin123")
        print("=" * 50)
        print("Change this password after signing in!")
        print("=" * 50)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(create_default_admin())
