from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base declarativa; cada modelo define su __tablename__ de forma explícita"""
    pass
