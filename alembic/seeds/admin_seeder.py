"""Admin user seeder.

Creates the ``admin`` account with the Admin role unless some user already
holds that role. The password comes from ``SEED_ADMIN_PASSWORD`` and is
stored as a PBKDF2 hash.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.config import settings
from src.domain.enums import UserRole
from src.infrastructure.security.pbkdf2_password_service import Pbkdf2PasswordService

logger = structlog.get_logger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@properties.com"


async def seed_admin_user(session: AsyncSession) -> None:
    """Seed the administrator account.

    Args:
        session: Async database session.
    """
    existing = await session.execute(
        text("""
            SELECT 1 FROM users u
            JOIN user_roles ur ON ur.user_id = u.id
            JOIN roles r ON r.id = ur.role_id
            WHERE r.name = :role
            LIMIT 1
        """),
        {"role": UserRole.ADMIN.value},
    )
    if existing.fetchone() is not None:
        logger.info("admin_seeding_skipped", reason="admin_exists")
        return

    role_row = (
        await session.execute(
            text("SELECT id FROM roles WHERE name = :role"),
            {"role": UserRole.ADMIN.value},
        )
    ).fetchone()
    if role_row is None:
        logger.error("admin_seeding_failed", reason="admin_role_missing")
        return

    user_id = uuid7()
    password_hash = Pbkdf2PasswordService().hash_password(settings.seed_admin_password)

    await session.execute(
        text("""
            INSERT INTO users (
                id, username, email, password_hash, first_name, last_name,
                is_active, created_at, updated_at
            )
            VALUES (
                :id, :username, :email, :password_hash, :first_name, :last_name,
                :is_active, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP
            )
        """),
        {
            "id": user_id,
            "username": ADMIN_USERNAME,
            "email": ADMIN_EMAIL,
            "password_hash": password_hash,
            "first_name": "System",
            "last_name": "Administrator",
            "is_active": True,
        },
    )
    await session.execute(
        text("INSERT INTO user_roles (user_id, role_id) VALUES (:user_id, :role_id)"),
        {"user_id": user_id, "role_id": role_row[0]},
    )

    logger.info("admin_seeding_complete", username=ADMIN_USERNAME)
