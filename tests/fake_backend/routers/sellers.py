"""CRUD endpoints for sellers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fake_backend.deps import get_state
from fake_backend.schemas import SellerBody
from fake_backend.state import BackendState

router = APIRouter()


@router.get("", summary="List all sellers")
async def list_sellers(state: BackendState = Depends(get_state)) -> list[dict]:
    return [dict(row) for row in state.sellers.values()]


@router.post("", summary="Create a seller", status_code=status.HTTP_201_CREATED)
async def create_seller(
    payload: SellerBody,
    state: BackendState = Depends(get_state),
) -> dict:
    data = payload.model_dump(by_alias=True)
    return state.add_seller(
        data.pop("name") or "", data.pop("email") or "", data.pop("password") or "", **data
    )


@router.put("/{seller_id}", summary="Update existing seller")
async def update_seller(
    seller_id: int,
    payload: SellerBody,
    state: BackendState = Depends(get_state),
) -> dict:
    row = state.sellers.get(seller_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Seller not found")
    row.update(payload.model_dump(by_alias=True, exclude_unset=True))
    return row


@router.delete("/{seller_id}", summary="Delete seller")
async def delete_seller(
    seller_id: int,
    state: BackendState = Depends(get_state),
) -> dict:
    state.sellers.pop(seller_id, None)
    return {"deleted": seller_id}
