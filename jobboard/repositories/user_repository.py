# =============================================
# jobboard/repositories/user_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional, List, Dict, Any
import logging

from jobboard.config.database import utcnow
from jobboard.database.models.user import User
from jobboard.schemas.enums import UserRole
from jobboard.schemas.user import UserUpsert
from jobboard.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Columns a login may refresh on an existing row
UPSERT_FIELDS = ("email", "first_name", "last_name", "profile_image_url")

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _insert(self):
        """Dialect insert so ON CONFLICT is available on both backends"""
        if self.db.get_bind().dialect.name == "sqlite":
            return sqlite.insert(User)
        return postgresql.insert(User)

    # =============================================
    # BASIC OPERATIONS
    # =============================================

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, user_data: UserUpsert) -> User:
        """
        Insert the user or refresh their identity fields in one statement.

        ``role`` only applies to a new row: an existing user keeps their role
        and approval state.
        """
        identity = user_data.model_dump(include=set(UPSERT_FIELDS), exclude_unset=True)

        stmt = self._insert().values(
            id=user_data.id,
            role=user_data.role,
            **identity
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.id],
            set_={**identity, "updated_at": utcnow()}
        ).returning(User)

        try:
            result = await self.db.execute(
                stmt, execution_options={"populate_existing": True}
            )
            user = result.scalar_one()
            await self.db.commit()
            logger.info(f"User upserted: {user.id}")
            return user
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"Integrity error upserting user {user_data.id}: {e}")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error upserting user {user_data.id}: {e}")
            raise DatabaseError("upsert", str(e))

    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Merge the given fields into the user row"""
        user = await self.get_by_id(user_id)
        if not user:
            return None

        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = utcnow()

        try:
            await self.db.commit()
            return user
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"Integrity error updating user {user_id}: {e}")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error updating user {user_id}: {e}")
            raise DatabaseError("update", str(e))

    # =============================================
    # RECRUITER APPROVAL
    # =============================================

    async def get_pending_recruiters(self) -> List[User]:
        """Recruiters waiting for approval, oldest first"""
        stmt = select(User).where(
            and_(User.role == UserRole.RECRUITER, User.is_approved.is_(False))
        ).order_by(User.created_at.asc(), User.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def approve_recruiter(self, user_id: str) -> bool:
        """Mark a recruiter approved. Approving twice is not an error."""
        user = await self.get_by_id(user_id)
        if not user or user.role != UserRole.RECRUITER:
            return False

        user.is_approved = True
        user.updated_at = utcnow()
        try:
            await self.db.commit()
            return True
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error approving recruiter {user_id}: {e}")
            raise DatabaseError("approve", str(e))

    async def reject_recruiter(self, user_id: str) -> bool:
        """Delete a pending recruiter together with their jobs and applications"""
        stmt = delete(User).where(
            and_(
                User.id == user_id,
                User.role == UserRole.RECRUITER,
                User.is_approved.is_(False)
            )
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error rejecting recruiter {user_id}: {e}")
            raise DatabaseError("delete", str(e))

    # =============================================
    # COUNTS
    # =============================================

    async def count_by_role(self, role: UserRole) -> int:
        stmt = select(func.count()).select_from(User).where(User.role == role)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count_pending_recruiters(self) -> int:
        stmt = select(func.count()).select_from(User).where(
            and_(User.role == UserRole.RECRUITER, User.is_approved.is_(False))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()
