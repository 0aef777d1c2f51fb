import logging

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models import Subscriber
from repositories import SubscriberRepository
from app.exceptions import BackendWriteError, ConflictError, ServiceValidationError

logger = logging.getLogger("recipeshare.newsletter")


class NewsletterService:
    @staticmethod
    def subscribe(db: Session, email: str) -> Subscriber:
        """
        Register a newsletter subscriber.

        Malformed addresses, duplicates and backend failures are reported
        as distinct errors.
        """
        try:
            email = validate_email(
                (email or "").strip(), check_deliverability=False
            ).normalized
        except EmailNotValidError as e:
            raise ServiceValidationError(
                "Please enter a valid email address",
                details={"field": "email", "reason": str(e)},
                code="INVALID_EMAIL",
            ) from e

        repo = SubscriberRepository(db)
        if repo.get_by_email(email):
            logger.info("newsletter_duplicate")
            raise ConflictError(
                "This email is already subscribed", code="ALREADY_SUBSCRIBED"
            )

        try:
            subscriber = repo.add(Subscriber(email=email))
            db.commit()
            db.refresh(subscriber)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("newsletter_subscribe_failed")
            raise BackendWriteError("Subscription failed, please try again") from e

        logger.info(f"newsletter_subscribed subscriber_id={subscriber.id}")
        return subscriber
