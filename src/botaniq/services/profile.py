"""Profile service: fetch and edit the caller's own profile."""

import logging
from uuid import UUID

from fastapi import UploadFile

from botaniq.config import settings
from botaniq.core.exceptions import NotFoundError
from botaniq.models.user import User
from botaniq.repositories.user import UserRepository
from botaniq.schemas.user import ProfileUpdate
from botaniq.services.avatar_storage import AvatarStorage

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile reads and partial updates with avatar replacement."""

    def __init__(self, user_repo: UserRepository, storage: AvatarStorage):
        self.user_repo = user_repo
        self.storage = storage

    async def get_profile(self, user_id: UUID) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("USER_001")
        return user

    async def update_profile(
        self,
        user_id: UUID,
        changes: ProfileUpdate,
        avatar: UploadFile | None = None,
    ) -> User:
        """
        Apply a partial profile edit, optionally replacing the avatar.

        The new avatar is written before the row update. If the update fails
        the new file is removed again; the previous avatar is only deleted
        once the row points at the new one.

        Args:
            user_id: Profile owner (the authenticated principal)
            changes: Fields to overwrite; omitted fields keep stored values
            avatar: Optional uploaded image

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
            PayloadTooLargeError: If the avatar exceeds the upload limit
        """
        user = await self.get_profile(user_id)
        old_avatar = user.avatar
        data = changes.model_dump(exclude_none=True)

        new_avatar = None
        if avatar is not None and avatar.filename:
            new_avatar = await self.storage.save(avatar)
            data["avatar"] = new_avatar

        try:
            updated = await self.user_repo.update(user_id, data)
        except Exception as e:
            if settings.debug:
                logger.exception("Profile update failed", extra={"error_type": type(e).__name__})
            else:
                logger.error("Profile update failed", extra={"error_type": type(e).__name__})
            await self.user_repo.db.rollback()
            if new_avatar:
                self.storage.delete(new_avatar)
            raise

        if updated is None:
            # Row vanished between the read and the write.
            if new_avatar:
                self.storage.delete(new_avatar)
            raise NotFoundError("USER_001")

        if new_avatar and old_avatar and old_avatar != new_avatar:
            self.storage.delete(old_avatar)

        logger.info(
            "Profile updated",
            extra={"user_id": str(user_id), "fields": sorted(data)},
        )
        return updated
