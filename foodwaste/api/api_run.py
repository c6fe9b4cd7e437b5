import logging
from typing import Optional

from fastapi import FastAPI

from foodwaste.api.routes import groceries, recipes
from foodwaste.infra.sample_data import seed_sample_data
from foodwaste.logic.session import KitchenSession
from foodwaste.utilities.config import DAYS_BEFORE_EXPIRY, SEED_SAMPLE_DATA

# Logging
logger = logging.getLogger("foodwaste_app")


def create_app(session: Optional[KitchenSession] = None, seed: Optional[bool] = None) -> FastAPI:
    """Build the API around ``session``; a fresh one (optionally seeded) when omitted."""
    if seed is None:
        seed = SEED_SAMPLE_DATA
    if session is None:
        session = KitchenSession(days_before_expiry=DAYS_BEFORE_EXPIRY)
        if seed:
            seed_sample_data(session)

    app = FastAPI(title="Fridge & Recipe API")
    app.state.session = session
    app.include_router(groceries.router)
    app.include_router(recipes.router)

    @app.get('/api/health')
    def health():
        return {
            "status": "ok",
            "groceries": len(app.state.session.fridge),
            "recipes": len(app.state.session.recipe_book),
        }

    logger.info("API ready with %d groceries and %d recipes",
                len(session.fridge), len(session.recipe_book))
    return app


app = create_app()
