"""Pedido (order) endpoints; every route requires a valid bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pesca_api.api.deps import get_current_user, get_pedido_service
from pesca_api.schemas.auth import CurrentUser
from pesca_api.schemas.pedido import PedidoCreate, PedidoOut
from pesca_api.services.pedidos import PedidoService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=PedidoOut, status_code=status.HTTP_201_CREATED)
def create_pedido(
    body: PedidoCreate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> PedidoOut:
    """Checkout: store a pedido owned by the caller and return it."""
    return service.create(user, body)


@router.get("", response_model=list[PedidoOut])
def list_pedidos(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PedidoService, Depends(get_pedido_service)],
) -> list[PedidoOut]:
    """The caller's pedidos, oldest first. Empty list when there are none."""
    return service.list_for(user)
