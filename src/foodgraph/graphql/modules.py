"""
Schema modules that make up the food graph, in registration order
"""

from .queries.category import CategoryQuery
from .queries.food import FoodQuery
from .queries.unit import UnitQuery
from .registry import SchemaModule
from .types.amino_acid import AminoAcid
from .types.category import Category, GetCategoryByIdOpts
from .types.fatty_acid import FattyAcid
from .types.food import Food
from .types.main import PrismaQueryOptions
from .types.nutrient import Nutrient
from .types.unit import Unit

main_module = SchemaModule(
    id="main-module",
    types=(PrismaQueryOptions,),
    declares_query=True,
)

unit_module = SchemaModule(id="unit-module", types=(Unit,), query=UnitQuery)

food_module = SchemaModule(id="food-module", types=(Food,), query=FoodQuery)

category_module = SchemaModule(
    id="category-module",
    types=(Category, GetCategoryByIdOpts),
    query=CategoryQuery,
)

amino_acid_module = SchemaModule(id="amino-acid-module", types=(AminoAcid,))

fatty_acid_module = SchemaModule(id="fatty-acid-module", types=(FattyAcid,))

nutrient_module = SchemaModule(id="nutrient-module", types=(Nutrient,))

MODULES: tuple[SchemaModule, ...] = (
    main_module,
    unit_module,
    food_module,
    category_module,
    amino_acid_module,
    fatty_acid_module,
    nutrient_module,
)
