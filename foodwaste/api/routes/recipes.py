from fastapi import APIRouter, Depends, HTTPException, Query

from foodwaste.api.routes.groceries import get_session
from foodwaste.domain.Recipe import Recipe
from foodwaste.logic.session import KitchenSession
from foodwaste.utilities.validators import RecipeInput, ShoppingListInput, SmoothieInput

router = APIRouter()


@router.get('/api/recipes')
def list_recipes(session: KitchenSession = Depends(get_session)):
    recipes = session.get_recipes()
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post('/api/recipes', status_code=201)
def add_recipe(payload: RecipeInput, session: KitchenSession = Depends(get_session)):
    try:
        recipe = Recipe(payload.name, payload.description, payload.procedure,
                        payload.ingredients, payload.serves)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session.add_recipe(recipe)
    return {"success": True, "recipe": recipe.to_dict()}


@router.delete('/api/recipes/{name}')
def delete_recipe(name: str, session: KitchenSession = Depends(get_session)):
    if not session.remove_recipe(name):
        raise HTTPException(status_code=404, detail='Recipe not found')
    return {"success": True}


@router.get('/api/recipes/available')
def recipes_available(include_expired: bool = Query(default=False),
                      session: KitchenSession = Depends(get_session)):
    """Return recipes the fridge currently has every ingredient for.

    Response JSON structure:
        {
          "count": <int>,
          "total": <int>,
          "include_expired": <bool>,
          "recipes": [ { name, serves, times_possible } ]
        }
    """
    available = session.summarize_possible_recipes(include_expired)
    return {
        "count": len(available),
        "total": len(session.recipe_book),
        "include_expired": include_expired,
        "recipes": available,
    }


@router.get('/api/recipes/smoothies')
def smoothie_recipes(session: KitchenSession = Depends(get_session)):
    recipes = session.get_smoothie_recipes()
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post('/api/smoothies', status_code=201)
def blend_smoothie(payload: SmoothieInput, session: KitchenSession = Depends(get_session)):
    smoothie = session.create_smoothie(payload.name, payload.description, payload.portions)
    if smoothie is None:
        raise HTTPException(status_code=409, detail='Not enough groceries for this smoothie')
    return {
        "success": True,
        "name": smoothie.name,
        "total_price": round(smoothie.calculate_total_price(), 2),
        "ingredients": [g.to_dict() for g in smoothie.ingredients],
    }


@router.post('/api/shopping-list')
def shopping_list(payload: ShoppingListInput, session: KitchenSession = Depends(get_session)):
    try:
        items = session.build_shopping_list(payload.recipes, payload.include_expired)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"count": len(items), "items": items}
