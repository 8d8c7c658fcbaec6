from sqlalchemy import Column, Integer, String, Text, Numeric
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Product(Base):
    """Product record in the catalog"""

    __tablename__ = "Product"
    # SQLite reuses rowids without AUTOINCREMENT
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(18, 2), nullable=False)
    category = Column(String(255), nullable=False, index=True)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name!r} category={self.category!r}>"
