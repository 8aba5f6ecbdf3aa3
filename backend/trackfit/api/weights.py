import logging
from datetime import date

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trackfit.core.config import settings
from trackfit.core.constants import MSG_LIST_FAILED, MSG_SAVE_FAILED, MSG_SAVED
from trackfit.core.errors import StorageError
from trackfit.core.merge import merge_series
from trackfit.db import get_db
from trackfit.models.weight import Weight
from trackfit.schemas.weight import (
    MergedPointRead,
    MessageResponse,
    WeightCreate,
    WeightRead,
)

router = APIRouter(prefix="/api/weights", tags=["weights"])
logger = logging.getLogger(__name__)


def list_all_weights(db: Session) -> list[Weight]:
    """All stored weights, newest date first; same-day entries newest insert first."""
    try:
        return db.query(Weight).order_by(Weight.date.desc(), Weight.id.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error fetching weight history")
        raise StorageError(MSG_LIST_FAILED)


def append_weight(db: Session, day: date, weight: float) -> Weight:
    row = Weight(date=day, weight=weight)
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error saving weight for %s", day)
        raise StorageError(MSG_SAVE_FAILED)
    logger.info("Saved weight id=%s date=%s weight=%skg", row.id, row.date, row.weight)
    return row


@router.get("", response_model=list[WeightRead])
def list_weights(db: Session = Depends(get_db)):
    return [
        WeightRead(date=row.date, weight=float(row.weight))
        for row in list_all_weights(db)
    ]


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_weight(payload: WeightCreate, db: Session = Depends(get_db)):
    append_weight(db, date.fromisoformat(payload.date), payload.weight)
    return MessageResponse(message=MSG_SAVED)


@router.get("/series", response_model=list[MergedPointRead])
def get_weight_series(db: Session = Depends(get_db)):
    """
    Recorded weights merged with the diet target curve, oldest date first.

    This is the data the chart on `/` is drawn from.
    """
    points = merge_series(list_all_weights(db), settings.target_config())
    return [MergedPointRead.model_validate(p) for p in points]
