"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from datetime import date, datetime
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from foodwaste.utilities.constants import DATE_FORMAT


def parse_date(value):
    """Accept a date, a DD-MM-YYYY string or an ISO YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        for fmt in (DATE_FORMAT, '%Y-%m-%d'):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Invalid date '{value}', expected DD-MM-YYYY or YYYY-MM-DD")
    return value


class GroceryInput(BaseModel):
    """Schema for grocery lot input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    price_per_unit: float = Field(..., ge=0)
    expiry_date: date

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('expiry_date', mode='before')
    @classmethod
    def validate_expiry(cls, v):
        return parse_date(v)


class RemoveGroceryInput(BaseModel):
    """Schema for removing a quantity of a grocery."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    procedure: str = ""
    ingredients: Dict[str, float] = Field(default_factory=dict)
    serves: int = Field(1, ge=1, le=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ingredient names must be non-empty and quantities non-negative."""
        cleaned = {}
        for name, qty in v.items():
            if not name or not name.strip():
                raise ValueError('Ingredient name cannot be empty')
            if qty < 0:
                raise ValueError(f"Required quantity for '{name}' cannot be negative")
            cleaned[name.strip()] = qty
        return cleaned


class SmoothieInput(BaseModel):
    """Schema for blending a smoothie out of fridge groceries."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    portions: Dict[str, float]

    @field_validator('portions')
    @classmethod
    def validate_portions(cls, v):
        if not v:
            raise ValueError('Smoothie must have at least one ingredient')
        for name, qty in v.items():
            if qty <= 0:
                raise ValueError(f"Portion of '{name}' must be positive")
        return v


class ShoppingListInput(BaseModel):
    """Schema for the recipes a shopping list should cover."""
    recipes: List[str] = Field(..., min_length=1)
    include_expired: bool = False
