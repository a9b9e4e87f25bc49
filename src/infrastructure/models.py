"""
SQLAlchemy ORM models.

Tables
------
* ``Rides`` -- one row per recorded ride.  Column names keep the
  camelCase names exposed on the wire (``rideID``, ``startLat`` ...);
  attributes are snake_case.
"""

from sqlalchemy import Column, DateTime, Float, Integer, String, func

from .database import Base


class RideModel(Base):
    __tablename__ = "Rides"

    id = Column("rideID", Integer, primary_key=True, autoincrement=True)

    start_lat = Column("startLat", Float, nullable=False)
    start_long = Column("startLong", Float, nullable=False)
    end_lat = Column("endLat", Float, nullable=False)
    end_long = Column("endLong", Float, nullable=False)

    rider_name = Column("riderName", String, nullable=False)
    driver_name = Column("driverName", String, nullable=False)
    driver_vehicle = Column("driverVehicle", String, nullable=False)

    created_at = Column(
        "created", DateTime(timezone=True), server_default=func.now()
    )

    # Ids are never reused, even after the highest row is gone
    __table_args__ = {"sqlite_autoincrement": True}

    # Fetch server-side defaults (``created``) at flush time
    __mapper_args__ = {"eager_defaults": True}
