import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Float, Integer, String

from space_app.database import Base


class ShipType(str, enum.Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class Ship(Base):
    __tablename__ = 'ships'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), index=True)
    planet = Column(String(50), index=True)
    ship_type = Column(Enum(ShipType, name="ship_type"), index=True)
    prod_date = Column(DateTime)
    is_used = Column(Boolean, default=False)
    speed = Column(Float)
    crew_size = Column(Integer)
    rating = Column(Float)

    def __repr__(self):
        return f"<Ship {self.id} {self.name}>"
