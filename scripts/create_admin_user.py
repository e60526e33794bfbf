import argparse
import asyncio
import getpass
import sys

from sqlmodel import select

from app.api.db.database import Base, engine, get_db
from app.api.modules.v1.users.models.users_model import AdminUser
from app.api.utils.password import hash_password
from app.api.utils.validators import is_strong_password


async def create_admin_user(username: str, email: str, full_name: str, password: str) -> None:
    """Create an administrator, or reset the password of an existing one."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async for db in get_db():
        admin = await db.scalar(select(AdminUser).where(AdminUser.username == username))

        if admin:
            admin.password_hash = hash_password(password)
            admin.is_active = True
            db.add(admin)
            await db.commit()
            print(f"Password reset for administrator '{username}'")
            return

        db.add(
            AdminUser(
                username=username,
                email=email,
                full_name=full_name,
                password_hash=hash_password(password),
            )
        )
        await db.commit()
        print(f"Administrator '{username}' created")


def main() -> int:
    parser = argparse.ArgumentParser(description="Create or reset a dashboard administrator.")
    parser.add_argument("username")
    parser.add_argument("--email", required=True)
    parser.add_argument("--full-name", default="Administrator")
    args = parser.parse_args()

    password = getpass.getpass("Password: ")
    problem = is_strong_password(password)
    if problem:
        print(problem, file=sys.stderr)
        return 1
    if password != getpass.getpass("Confirm password: "):
        print("Passwords do not match.", file=sys.stderr)
        return 1

    try:
        asyncio.run(
            create_admin_user(args.username, args.email.lower(), args.full_name, password)
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
