"""
Database models for the food composition store.

The tables are owned by the store; these mappings describe what foodgraph
reads from them. Nothing in foodgraph writes to these tables.
"""

from sqlalchemy import (
    Float,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models."""

    metadata = MetaData(naming_convention=naming_convention)


class Categories(Base):
    __tablename__ = "category"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="category_pkey"),
        UniqueConstraint("name", name="category_name_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    foods: Mapped[list["Foods"]] = relationship(
        "Foods", uselist=True, back_populates="category", order_by="Foods.id"
    )


class Foods(Base):
    __tablename__ = "food"
    __table_args__ = (
        ForeignKeyConstraint(
            ["category_id"],
            ["category.id"],
            name="food_category_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="food_pkey"),
        Index("idx_food_category", "category_id"),
        Index("idx_food_name", "name"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[int] = mapped_column(Integer, nullable=False)

    category: Mapped["Categories"] = relationship("Categories", back_populates="foods")
    nutrients: Mapped["Nutrients | None"] = relationship(
        "Nutrients", uselist=False, back_populates="food"
    )
    amino_acids: Mapped["AminoAcids | None"] = relationship(
        "AminoAcids", uselist=False, back_populates="food"
    )
    fatty_acids: Mapped["FattyAcids | None"] = relationship(
        "FattyAcids", uselist=False, back_populates="food"
    )


class Nutrients(Base):
    __tablename__ = "nutrient"
    __table_args__ = (
        ForeignKeyConstraint(
            ["food_id"],
            ["food.id"],
            ondelete="CASCADE",
            name="nutrient_food_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="nutrient_pkey"),
        UniqueConstraint("food_id", name="nutrient_food_id_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    food_id: Mapped[int] = mapped_column(Integer, nullable=False)
    moisture: Mapped[float | None] = mapped_column(Float)
    kcal: Mapped[float | None] = mapped_column(Float)
    kj: Mapped[float | None] = mapped_column(Float)
    protein: Mapped[float | None] = mapped_column(Float)
    lipids: Mapped[float | None] = mapped_column(Float)
    cholesterol: Mapped[float | None] = mapped_column(Float)
    carbohydrates: Mapped[float | None] = mapped_column(Float)
    dietary_fiber: Mapped[float | None] = mapped_column(Float)
    ash: Mapped[float | None] = mapped_column(Float)
    calcium: Mapped[float | None] = mapped_column(Float)
    magnesium: Mapped[float | None] = mapped_column(Float)
    manganese: Mapped[float | None] = mapped_column(Float)
    phosphorus: Mapped[float | None] = mapped_column(Float)
    iron: Mapped[float | None] = mapped_column(Float)
    sodium: Mapped[float | None] = mapped_column(Float)
    potassium: Mapped[float | None] = mapped_column(Float)
    copper: Mapped[float | None] = mapped_column(Float)
    zinc: Mapped[float | None] = mapped_column(Float)
    retinol: Mapped[float | None] = mapped_column(Float)
    re: Mapped[float | None] = mapped_column(Float)
    rae: Mapped[float | None] = mapped_column(Float)
    thiamin: Mapped[float | None] = mapped_column(Float)
    riboflavin: Mapped[float | None] = mapped_column(Float)
    pyridoxine: Mapped[float | None] = mapped_column(Float)
    niacin: Mapped[float | None] = mapped_column(Float)
    vitamin_c: Mapped[float | None] = mapped_column(Float)

    food: Mapped["Foods"] = relationship("Foods", back_populates="nutrients")


class AminoAcids(Base):
    __tablename__ = "amino_acid"
    __table_args__ = (
        ForeignKeyConstraint(
            ["food_id"],
            ["food.id"],
            ondelete="CASCADE",
            name="amino_acid_food_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="amino_acid_pkey"),
        UniqueConstraint("food_id", name="amino_acid_food_id_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    food_id: Mapped[int] = mapped_column(Integer, nullable=False)
    tryptophan: Mapped[float | None] = mapped_column(Float)
    threonine: Mapped[float | None] = mapped_column(Float)
    isoleucine: Mapped[float | None] = mapped_column(Float)
    leucine: Mapped[float | None] = mapped_column(Float)
    lysine: Mapped[float | None] = mapped_column(Float)
    methionine: Mapped[float | None] = mapped_column(Float)
    cystine: Mapped[float | None] = mapped_column(Float)
    phenylalanine: Mapped[float | None] = mapped_column(Float)
    tyrosine: Mapped[float | None] = mapped_column(Float)
    valine: Mapped[float | None] = mapped_column(Float)
    arginine: Mapped[float | None] = mapped_column(Float)
    histidine: Mapped[float | None] = mapped_column(Float)
    alanine: Mapped[float | None] = mapped_column(Float)
    aspartic_acid: Mapped[float | None] = mapped_column(Float)
    glutamic_acid: Mapped[float | None] = mapped_column(Float)
    glycine: Mapped[float | None] = mapped_column(Float)
    proline: Mapped[float | None] = mapped_column(Float)
    serine: Mapped[float | None] = mapped_column(Float)

    food: Mapped["Foods"] = relationship("Foods", back_populates="amino_acids")


class FattyAcids(Base):
    __tablename__ = "fatty_acid"
    __table_args__ = (
        ForeignKeyConstraint(
            ["food_id"],
            ["food.id"],
            ondelete="CASCADE",
            name="fatty_acid_food_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="fatty_acid_pkey"),
        UniqueConstraint("food_id", name="fatty_acid_food_id_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    food_id: Mapped[int] = mapped_column(Integer, nullable=False)
    saturated: Mapped[float] = mapped_column(Float, nullable=False)
    monounsaturated: Mapped[float] = mapped_column(Float, nullable=False)
    polyunsaturated: Mapped[float] = mapped_column(Float, nullable=False)
    twelve_zero: Mapped[float | None] = mapped_column(Float)
    fourteen_zero: Mapped[float | None] = mapped_column(Float)
    fourteen_one: Mapped[float | None] = mapped_column(Float)
    sixteen_zero: Mapped[float | None] = mapped_column(Float)
    sixteen_one: Mapped[float | None] = mapped_column(Float)
    eighteen_zero: Mapped[float | None] = mapped_column(Float)
    eighteen_one: Mapped[float | None] = mapped_column(Float)
    eighteen_one_t: Mapped[float | None] = mapped_column(Float)
    eighteen_two_n6: Mapped[float | None] = mapped_column(Float)
    eighteen_two_t: Mapped[float | None] = mapped_column(Float)
    eighteen_three_n3: Mapped[float | None] = mapped_column(Float)
    twenty_zero: Mapped[float | None] = mapped_column(Float)
    twenty_one: Mapped[float | None] = mapped_column(Float)
    twenty_four: Mapped[float | None] = mapped_column(Float)
    twenty_five: Mapped[float | None] = mapped_column(Float)
    twenty_two_zero: Mapped[float | None] = mapped_column(Float)
    twenty_two_five: Mapped[float | None] = mapped_column(Float)
    twenty_two_six: Mapped[float | None] = mapped_column(Float)
    twenty_four_zero: Mapped[float | None] = mapped_column(Float)

    food: Mapped["Foods"] = relationship("Foods", back_populates="fatty_acids")


class Units(Base):
    __tablename__ = "unit"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="unit_pkey"),
        UniqueConstraint("field_name", name="unit_field_name_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    field_name: Mapped[str] = mapped_column(String(100), nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    label_pt: Mapped[str] = mapped_column(String(255), nullable=False)
    infoods_tagname: Mapped[str | None] = mapped_column(String(100))
    systematic_name: Mapped[str | None] = mapped_column(String(255))
    common_name: Mapped[str | None] = mapped_column(String(255))


__all__ = [
    "Base",
    "Categories",
    "Foods",
    "Nutrients",
    "AminoAcids",
    "FattyAcids",
    "Units",
]
