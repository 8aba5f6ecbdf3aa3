from sqlalchemy import Column, Date, Float, Integer
from trackfit.db import Base


class Weight(Base):
    __tablename__ = "weights"

    # Surrogate key; also records insertion order for same-day entries
    id = Column(Integer, primary_key=True, index=True)

    # Not unique: several entries on one day are allowed
    date = Column(Date, nullable=False, index=True)

    weight = Column(Float, nullable=False)  # kg, stored as submitted
