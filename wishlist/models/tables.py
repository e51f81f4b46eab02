from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base

from wishlist.core.models import Permission

Base = declarative_base()


class WishlistTable(Base):
    __tablename__ = "wishlists"

    # Surrogate key preserving insertion order; rows are addressed by ``id``
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False, default="")
    password = Column(String, nullable=False, default="")
    ownership = Column(String, nullable=False, default="", index=True)


class WishlistViewerTable(Base):
    __tablename__ = "wishlist_viewers"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, index=True)
    wishlist_id = Column(String, ForeignKey("wishlists.id"), nullable=False)
    ownership = Column(String, nullable=False, index=True)
    permission = Column(Enum(Permission), nullable=False, default=Permission.VIEW)


class ItemTable(Base):
    __tablename__ = "items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, index=True)
    wishlist_id = Column(String, ForeignKey("wishlists.id"), nullable=False, index=True)
    url = Column(Text, nullable=False, default="")
    name = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    image = Column(Text, nullable=False, default="")
