"""Order flow: checkout and listing, always scoped to the authenticated user."""

import logging

from pesca_api.schemas.auth import CurrentUser
from pesca_api.schemas.pedido import PedidoCreate, PedidoOut
from pesca_api.services.stores import PedidoStore

logger = logging.getLogger(__name__)


class PedidoService:
    def __init__(self, pedidos: PedidoStore) -> None:
        self.pedidos = pedidos

    def create(self, user: CurrentUser, data: PedidoCreate) -> PedidoOut:
        pedido = self.pedidos.add(user_id=user.id, product=data.product, price=data.price)
        logger.info(
            "Pedido created: id=%s user_id=%s product=%s price=%s",
            pedido.id,
            user.id,
            pedido.product,
            pedido.price,
        )
        return PedidoOut.model_validate(pedido)

    def list_for(self, user: CurrentUser) -> list[PedidoOut]:
        """All pedidos owned by user in insertion order; empty list when none."""
        return [PedidoOut.model_validate(p) for p in self.pedidos.list_by_user(user.id)]
