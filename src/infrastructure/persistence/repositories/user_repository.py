"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database User models.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.enums import EntityState
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.role import Role as RoleModel
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Username and email comparisons are case-insensitive.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(func.lower(UserModel.username) == username.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def username_exists(self, username: str) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.username) == username.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def email_exists(self, email: str) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, user: User) -> None:
        """Insert a new user linked to the roles named in ``user.roles``.

        Raises:
            ValueError: If the user is not NEW or a role does not exist.
        """
        if user.state is not EntityState.NEW:
            raise ValueError(f"User {user.id} is already persisted")

        roles: list[RoleModel] = []
        if user.roles:
            result = await self.session.execute(
                select(RoleModel).where(RoleModel.name.in_(user.roles))
            )
            roles = list(result.scalars().all())
            missing = set(user.roles) - {role.name for role in roles}
            if missing:
                raise ValueError(f"Unknown roles: {', '.join(sorted(missing))}")

        user_model = UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
        )
        user_model.roles = roles
        self.session.add(user_model)
        await self.session.flush()

        user.created_at = as_utc(user_model.created_at)
        user.updated_at = as_utc(user_model.updated_at)
        user.mark_loaded()

    async def update(self, user: User) -> None:
        """Write a DIRTY user back (profile fields, status and last login)."""
        if user.state is EntityState.NEW:
            raise ValueError("Cannot update a user that was never persisted")
        if user.state is EntityState.LOADED:
            return

        user_model = await self.session.get(UserModel, user.id)
        if user_model is None:
            raise ValueError(f"User {user.id} no longer exists")

        user_model.username = user.username
        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.first_name = user.first_name
        user_model.last_name = user.last_name
        user_model.is_active = user.is_active
        user_model.last_login_at = user.last_login_at
        await self.session.flush()

        user.updated_at = as_utc(user_model.updated_at)
        user.mark_loaded()

    def _to_domain(self, user_model: UserModel) -> User:
        user = User(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            password_hash=user_model.password_hash,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            is_active=user_model.is_active,
            roles=sorted(role.name for role in user_model.roles),
            last_login_at=as_utc(user_model.last_login_at),
            created_at=as_utc(user_model.created_at),
            updated_at=as_utc(user_model.updated_at),
        )
        user.mark_loaded()
        return user
