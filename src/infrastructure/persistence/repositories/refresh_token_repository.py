"""RefreshTokenRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain RefreshToken entities and database RefreshToken models.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.refresh_token import RefreshToken
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.refresh_token import (
    RefreshToken as RefreshTokenModel,
)


class RefreshTokenRepository:
    """SQLAlchemy implementation of RefreshTokenRepository protocol.

    Tokens are never deleted; revocation sets ``revoked_at``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, token: RefreshToken) -> None:
        token_model = RefreshTokenModel(
            id=token.id,
            user_id=token.user_id,
            token_hash=token.token_hash,
            expires_at=token.expires_at,
            revoked_at=token.revoked_at,
        )
        if token.created_at is not None:
            token_model.created_at = token.created_at
        self.session.add(token_model)
        await self.session.flush()
        token.created_at = as_utc(token_model.created_at)

    async def find_by_id(self, token_id: UUID) -> RefreshToken | None:
        token_model = await self.session.get(RefreshTokenModel, token_id)
        if token_model is None:
            return None
        return self._to_domain(token_model)

    async def update(self, token: RefreshToken) -> None:
        token_model = await self.session.get(RefreshTokenModel, token.id)
        if token_model is None:
            raise ValueError(f"Refresh token {token.id} does not exist")
        token_model.revoked_at = token.revoked_at
        await self.session.flush()

    async def revoke_all_for_user(self, user_id: UUID, revoked_at: datetime) -> int:
        stmt = (
            update(RefreshTokenModel)
            .where(
                RefreshTokenModel.user_id == user_id,
                RefreshTokenModel.revoked_at.is_(None),
            )
            .values(revoked_at=revoked_at)
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)  # type: ignore[attr-defined]

    @staticmethod
    def _to_domain(token_model: RefreshTokenModel) -> RefreshToken:
        return RefreshToken(
            id=token_model.id,
            user_id=token_model.user_id,
            token_hash=token_model.token_hash,
            expires_at=as_utc(token_model.expires_at),  # type: ignore[arg-type]
            revoked_at=as_utc(token_model.revoked_at),
            created_at=as_utc(token_model.created_at),
        )
