from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    VEGETABLES = "Vegetables"
    FLOWERS = "Flowers"
    FRUITS = "Fruits"


class Plant(BaseModel):
    name: str
    price: Decimal = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class Product(BaseModel):
    pid: int
    type: Category
    plant: Plant

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.plant.name

    @property
    def price(self) -> Decimal:
        return self.plant.price
