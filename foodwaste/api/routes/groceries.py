from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from foodwaste.domain.Grocery import Grocery
from foodwaste.logic.session import KitchenSession
from foodwaste.utilities.validators import GroceryInput, RemoveGroceryInput

router = APIRouter()


def get_session(request: Request) -> KitchenSession:
    return request.app.state.session


def _dump(groceries):
    return [g.to_dict() for g in groceries]


@router.get('/api/groceries')
def list_groceries(sort: Optional[str] = Query(default=None, pattern=r'^(name|expiry)$'),
                   session: KitchenSession = Depends(get_session)):
    """Every lot in the fridge, expired ones included; optionally sorted."""
    if sort == 'name':
        groceries = session.get_groceries_sorted_by_name()
    elif sort == 'expiry':
        groceries = session.get_groceries_sorted_by_expiry_date()
    else:
        groceries = session.get_all_groceries()
    return {"count": len(groceries), "groceries": _dump(groceries)}


@router.get('/api/groceries/expired')
def list_expired(session: KitchenSession = Depends(get_session)):
    groceries = session.get_expired_groceries()
    return {"count": len(groceries), "groceries": _dump(groceries)}


@router.get('/api/groceries/search')
def search_groceries(name: str = Query(..., min_length=1), session: KitchenSession = Depends(get_session)):
    groceries = session.find_groceries_by_name(name)
    return {"count": len(groceries), "groceries": _dump(groceries)}


@router.get('/api/groceries/value')
def groceries_value(session: KitchenSession = Depends(get_session)):
    return {
        "total": round(session.calculate_total_value(), 2),
        "expired": round(session.calculate_total_value_of_expired(), 2),
    }


@router.post('/api/groceries', status_code=201)
def add_grocery(payload: GroceryInput, session: KitchenSession = Depends(get_session)):
    try:
        grocery = Grocery.from_dict(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session.add_grocery(grocery)
    return {"success": True, "groceries": _dump(session.find_groceries_by_name(grocery.name))}


@router.post('/api/groceries/remove')
def remove_grocery(payload: RemoveGroceryInput, session: KitchenSession = Depends(get_session)):
    """Remove a quantity, oldest lot first. All or nothing."""
    if payload.name not in session.fridge:
        raise HTTPException(status_code=404, detail='Grocery not found')
    if not session.remove_grocery(payload.name, payload.quantity):
        raise HTTPException(status_code=409, detail='Not enough stock')
    return {"success": True, "remaining": _dump(session.find_groceries_by_name(payload.name))}


@router.get('/api/fridge/alerts')
def fridge_alerts(since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
                  session: KitchenSession = Depends(get_session)):
    """
    Return recent fridge alert events (low stock, near expiry).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/fridge/alerts?since=<next_cursor>
    """
    if since is None and not session.alerts.get_events(None)['events']:
        session.fridge.scan_and_notify()
    return session.alerts.get_events(since)


@router.get('/api/fridge/snapshots')
def fridge_snapshots(window: Optional[int] = Query(default=None, ge=0),
                     session: KitchenSession = Depends(get_session)):
    expiring_soon, low_stock = session.pantry_snapshots(window=window)
    return {"expiring_soon": expiring_soon, "low_stock": low_stock}
