"""Privatisation option endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_privatisation_service
from domain.models import (
    PrivatisationOptionCreate,
    PrivatisationOptionRecord,
    PrivatisationOptionUpdate,
)
from services.privatisation_service import PrivatisationService


router = APIRouter(prefix="/privatisation-options", tags=["privatisation"])


@router.post("", response_model=PrivatisationOptionRecord, status_code=201)
def create_privatisation_option(
    payload: PrivatisationOptionCreate,
    service: PrivatisationService = Depends(get_privatisation_service),
):
    return service.create_option(payload)


@router.get("", response_model=List[PrivatisationOptionRecord])
def list_privatisation_options(
    restaurant_id: str = Query(..., alias="restaurantId"),
    service: PrivatisationService = Depends(get_privatisation_service),
):
    return service.list_for_restaurant(restaurant_id)


@router.get("/{option_id}", response_model=PrivatisationOptionRecord)
def get_privatisation_option(
    option_id: str,
    service: PrivatisationService = Depends(get_privatisation_service),
):
    return service.get_option(option_id)


@router.patch("/{option_id}", response_model=PrivatisationOptionRecord)
def update_privatisation_option(
    option_id: str,
    payload: PrivatisationOptionUpdate,
    service: PrivatisationService = Depends(get_privatisation_service),
):
    return service.update_option(option_id, payload)


@router.delete("/{option_id}")
def delete_privatisation_option(
    option_id: str,
    service: PrivatisationService = Depends(get_privatisation_service),
):
    return {"deleted": service.delete_option(option_id)}
