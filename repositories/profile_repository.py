"""
Profile Repository - Data access layer for public profiles and subscribers
"""

from typing import Dict, Iterable, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Profile, Subscriber


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profile rows"""

    def __init__(self, db: Session):
        super().__init__(db, Profile)

    def display_names(self, user_ids: Iterable[UUID]) -> Dict[UUID, str]:
        """Full names of the given users, fetched once for all distinct ids"""
        ids = list(set(user_ids))
        if not ids:
            return {}
        rows = (
            self.db.query(Profile.id, Profile.full_name)
            .filter(Profile.id.in_(ids))
            .all()
        )
        return {user_id: full_name for user_id, full_name in rows if full_name}

    def upsert(self, user_id: UUID, **kwargs) -> Profile:
        """Create or update the profile keyed by user id"""
        profile = self.get_by_id(user_id)
        if profile:
            for key, value in kwargs.items():
                if hasattr(profile, key):
                    setattr(profile, key, value)
        else:
            profile = Profile(id=user_id, **kwargs)
            self.db.add(profile)
        self.db.flush()
        return profile


class SubscriberRepository(BaseRepository[Subscriber]):
    """Repository for newsletter subscribers"""

    def __init__(self, db: Session):
        super().__init__(db, Subscriber)

    def get_by_email(self, email: str) -> Optional[Subscriber]:
        return self.db.query(Subscriber).filter(Subscriber.email == email).first()
