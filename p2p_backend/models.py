from sqlalchemy import CheckConstraint, Column, Float, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

AD_TYPES = ("buy", "sell")


class Ad(Base):
    __tablename__ = "ads"
    __table_args__ = (
        CheckConstraint("type IN ('buy', 'sell')", name="ck_ads_type"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    amount = Column(Float, nullable=False)
    type = Column(Text, nullable=False)
