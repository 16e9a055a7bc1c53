"""
User Store - public user rows mirrored from Supabase auth users
"""
from typing import Optional
import uuid

from sqlalchemy.dialects.postgresql import insert

from app.models.user import User, UserProfile
from app.stores.base import BaseStore


class UserStore(BaseStore):

    async def upsert_profile(
        self,
        user_id: str,
        email: str,
        full_name: str,
        phone: Optional[str] = None,
    ) -> None:
        """Upsert the users row and its user_profiles row in one transaction"""
        uid = uuid.UUID(str(user_id))
        user_stmt = insert(User).values(id=uid, email=email, phone=phone).on_conflict_do_update(
            index_elements=[User.id],
            set_={"email": email, "phone": phone},
        )
        profile_stmt = insert(UserProfile).values(
            id=uid, full_name=full_name, email=email, phone=phone,
        ).on_conflict_do_update(
            index_elements=[UserProfile.id],
            set_={"full_name": full_name, "email": email, "phone": phone},
        )
        async with self.session() as db:
            await db.execute(user_stmt)
            await db.execute(profile_stmt)
