from sqlmodel import SQLModel, Field
from sqlalchemy import BigInteger, Column, Integer
from typing import Optional


class ProductBase(SQLModel):
    name: str = Field(index=True)
    price: float


class Product(ProductBase, table=True):
    __tablename__ = "products"

    # BIGINT everywhere except SQLite, where only INTEGER autoincrements
    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
    )


class ProductCreate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: int
