from sqlalchemy import Column, String, JSON
from availability_api.core.config import settings
from availability_api.core.database import Base

class Availability(Base):
    __tablename__ = settings.TABLE_NAME

    # "YYYY-MM-DD"; lexical order matches calendar order
    date = Column(String, primary_key=True)
    status = Column(String, nullable=True)
    message = Column(String, nullable=True)
    # Opaque slot descriptors, e.g. ["9am", "2pm"]
    time_slots = Column(JSON, nullable=True)
