from sqlalchemy import Column, Integer, String, JSON, DateTime
from .db import Base


class Worker(Base):
    __tablename__ = "workers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False, index=True)

    work_type = Column(String, nullable=False, index=True)  # domestic_help/cooking/driving/gardening
    work_subcategories = Column(JSON, nullable=True)
    years_experience = Column(Integer, nullable=True)
    languages_spoken = Column(JSON, nullable=True)
    preferred_areas = Column(JSON, nullable=True)
    residential_address = Column(String, nullable=True)
    working_hours = Column(String, nullable=True)  # morning/evening/full_day
    gender = Column(String, nullable=True)
    age = Column(Integer, nullable=True)

    status = Column(String, nullable=True, index=True)
    assigned_customer_id = Column(String, nullable=True, index=True)

    # written by the selection flow
    trial_start_date = Column(DateTime(timezone=True), nullable=True)
    trial_end_date = Column(DateTime(timezone=True), nullable=True)
    scheduled_call_date = Column(DateTime(timezone=True), nullable=True)
    match_score = Column(Integer, nullable=True)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True)
    service_type = Column(String, nullable=False)
    preferred_time = Column(String, nullable=True)
    address = Column(String, nullable=False)
    sub_services = Column(JSON, nullable=True)

    status = Column(String, nullable=False, index=True)  # pending/confirmed/cancelled/completed
    assigned_worker_id = Column(String, nullable=True, index=True)
    call_scheduled_at = Column(DateTime(timezone=True), nullable=True)
    call_status = Column(String, nullable=True)
