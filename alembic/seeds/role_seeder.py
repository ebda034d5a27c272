"""Role seeder.

Seeds the Admin, User and Agent roles. Idempotent via an existence check per
role name, so a role renamed or added later is seeded without touching the
others.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.domain.enums import UserRole

logger = structlog.get_logger(__name__)


async def seed_roles(session: AsyncSession) -> None:
    """Seed every UserRole into the roles table.

    Args:
        session: Async database session.
    """
    seeded_count = 0
    skipped_count = 0

    for role in UserRole:
        result = await session.execute(
            text("SELECT 1 FROM roles WHERE name = :name LIMIT 1"),
            {"name": role.value},
        )
        if result.fetchone() is not None:
            skipped_count += 1
            continue

        await session.execute(
            text("""
                INSERT INTO roles (id, name, description, created_at)
                VALUES (:id, :name, :description, CURRENT_TIMESTAMP)
            """),
            {"id": uuid7(), "name": role.value, "description": role.description},
        )
        seeded_count += 1

    logger.info(
        "role_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(UserRole),
    )
