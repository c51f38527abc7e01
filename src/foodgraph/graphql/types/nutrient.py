"""
Nutrient profile GraphQL type
"""

import strawberry


@strawberry.type
class Nutrient:
    """Centesimal composition, minerals and vitamins of a food."""

    moisture: float | None
    kcal: float | None
    kj: float | None = strawberry.field(name="kJ")
    protein: float | None
    lipids: float | None
    cholesterol: float | None
    carbohydrates: float | None
    dietary_fiber: float | None
    ash: float | None
    calcium: float | None
    magnesium: float | None
    manganese: float | None
    phosphorus: float | None
    iron: float | None
    sodium: float | None
    potassium: float | None
    copper: float | None
    zinc: float | None
    retinol: float | None
    re: float | None
    rae: float | None
    thiamin: float | None
    riboflavin: float | None
    pyridoxine: float | None
    niacin: float | None
    vitamin_c: float | None
