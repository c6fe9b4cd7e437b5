"""Core business logic layer.

Subpackages:
- inventory: grocery lot policies (clubbing, expiry, value)
- matching: recipe feasibility against a fridge snapshot
- smoothies: blending fridge groceries into smoothie recipes
- shopping: building shopping lists
- pantry: fridge analysis helpers
"""
__all__ = ["inventory", "matching", "smoothies", "shopping", "pantry"]
