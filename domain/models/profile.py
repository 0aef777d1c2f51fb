"""
Profile and newsletter database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, UUID as SQLUUID
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.models.recipe import utcnow


class Profile(Base):
    """Public profile, one per auth-provider user id"""

    __tablename__ = "profiles"

    id = Column(SQLUUID(as_uuid=True), primary_key=True)
    full_name = Column(Text)
    hobbies = Column(Text)
    profile_pic = Column(Text)
    updated_at = Column(
        TIMESTAMP(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
    )


class Subscriber(Base):
    """Newsletter subscription"""

    __tablename__ = "subscribers"

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    created_at = Column(
        TIMESTAMP(timezone=True), default=utcnow, server_default=func.now()
    )
