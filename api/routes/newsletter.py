"""Newsletter subscription route"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.responses import APIResponse, success_response
from domain.schemas.newsletter_schemas import SubscribeRequest, SubscriberResponse
from services.newsletter_service import NewsletterService

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])


@router.post(
    "/subscribe",
    response_model=APIResponse[SubscriberResponse],
    status_code=status.HTTP_201_CREATED,
)
def subscribe(request: SubscribeRequest, db: Session = Depends(get_db)):
    subscriber = NewsletterService.subscribe(db, request.email)
    return success_response(
        data=SubscriberResponse.model_validate(subscriber),
        message="Thanks for subscribing!",
    )
