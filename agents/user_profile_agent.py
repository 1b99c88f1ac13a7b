"""
User Profile Agent

This agent manages the single local user profile (name, email, phone) on top
of the persistence store, with async logging around each operation.

Features:
- Create-or-update in one call, as the profile screen does
- Validation through the UserProfile model (InvalidProfile on failure)
- Explicit deletion ("delete account")
"""

from typing import Optional

from constants import Messages
from models import InvalidProfile, UserProfile
from storage.app_storage import PersistenceStore
from storage.logs_manager import LogsManager


class UserProfileAgent:
    def __init__(self, store: PersistenceStore, logs_manager: LogsManager):
        """
        Args:
            store (PersistenceStore): Where the profile singleton lives
            logs_manager (LogsManager): Instance of LogsManager for async logging
        """
        self.store = store
        self.logs_manager = logs_manager

    async def get_profile(self) -> Optional[UserProfile]:
        """Retrieve the stored profile, or None if none was created yet."""
        profile = self.store.get_user_profile()
        if profile:
            await self.logs_manager.debug(f"Retrieved profile: {profile.id}")
        else:
            await self.logs_manager.debug("No profile stored yet")
        return profile

    async def save_profile(self, name: str, email: str, phone: Optional[str] = None) -> UserProfile:
        """Create the profile if none exists, otherwise update it in place."""
        existing = self.store.get_user_profile()
        try:
            if existing is None:
                profile = self.store.create_user_profile(name, email, phone)
                await self.logs_manager.info(Messages.PROFILE_CREATED.format(profile.name))
            else:
                updated = existing.model_copy(update={"name": name, "email": email, "phone": phone})
                profile = self.store.save_user_profile(updated)
                await self.logs_manager.info(Messages.PROFILE_UPDATED.format(profile.name))
            return profile
        except InvalidProfile as e:
            await self.logs_manager.warning(f"Profile validation failed: {str(e)}")
            raise
        except Exception as e:
            await self.logs_manager.error(f"Failed to save profile: {str(e)}")
            raise

    async def delete_profile(self) -> bool:
        """Delete the profile. Returns False if there was nothing to delete."""
        result = self.store.delete_user_profile()
        if result:
            await self.logs_manager.info("Profile deleted")
        else:
            await self.logs_manager.warning("No profile found to delete")
        return result
