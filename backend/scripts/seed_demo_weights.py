from datetime import timedelta
import random

from trackfit.core.config import settings
from trackfit.core.target_curve import target_for
from trackfit.db import Base, SessionLocal, engine
from trackfit.models.weight import Weight


def clear_weights(db) -> None:
    """Delete every stored weight so we can reseed cleanly."""
    db.query(Weight).delete()
    db.commit()


def seed_demo_weights(db, every_days: int = 3) -> None:
    """Insert a weigh-in every few days that loosely follows the target curve."""
    config = settings.target_config()

    rows_to_add = []
    day = config.start_date
    while day <= config.end_date:
        target = target_for(day, config)
        # Real weigh-ins wobble around the plan
        noise = round(random.uniform(-0.8, 1.2), 1)
        weight = min(max(target + noise, settings.form_min_weight), settings.form_max_weight)
        rows_to_add.append(Weight(date=day, weight=round(weight, 1)))
        day += timedelta(days=every_days)

    if rows_to_add:
        db.add_all(rows_to_add)
        db.commit()

    print(f"Seeded {len(rows_to_add)} demo weights")


def main():
    if engine is None:
        raise SystemExit("DATABASE_URL is not set")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_weights(db)
        seed_demo_weights(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
