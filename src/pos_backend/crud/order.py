import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import aliased

from pos_backend.db.session import STORE_ERRORS, Database
from pos_backend.exceptions import OrderValidationError, QueryError, TransactionError
from pos_backend.models import Item, Order, OrderStatusEnum, Product, Topping
from pos_backend.schemas.order import OrderLineView, OrderSubmit

logger = logging.getLogger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_order(order_in: OrderSubmit) -> None:
    """
    Проверки до обращения к БД.
    Топпинги не обязательны, отсутствие остаётся None (не 0).
    """
    if order_in.project_id is None:
        raise OrderValidationError("projectId is required")
    if order_in.user_id is None:
        raise OrderValidationError("userId is required")
    if order_in.total_price is None:
        raise OrderValidationError("totalPrice is required")
    if order_in.total_price < Decimal("0"):
        raise OrderValidationError("totalPrice must not be negative")
    if not order_in.items:
        raise OrderValidationError("items must be a non-empty list")

    for index, item in enumerate(order_in.items):
        if item.product_id is None:
            raise OrderValidationError(f"items[{index}]: productId is required")
        if not _is_positive_int(item.quantity):
            raise OrderValidationError(f"items[{index}]: quantity must be a positive integer")


class OrderTransactionManager:
    """
    Сохраняет заказ целиком: шапку orders и все строки items в одной транзакции.
    Частичный заказ снаружи не виден никогда.
    Повторный вызов с теми же данными создаёт новый заказ.
    """

    def __init__(self, db: Database):
        self.db = db

    async def submit_order(self, order_in: OrderSubmit) -> int:
        validate_order(order_in)

        try:
            async with self.db.session() as session:
                # begin() откатывает транзакцию при любом исключении внутри блока
                async with session.begin():
                    order = Order(
                        project_id=order_in.project_id,
                        user_id=order_in.user_id,
                        total_price=order_in.total_price,
                        status=OrderStatusEnum.open,
                        origin=order_in.origin,
                    )
                    session.add(order)
                    await session.flush()
                    order_id = order.order_id

                    for item in order_in.items:
                        session.add(
                            Item(
                                order_id=order_id,
                                product_id=item.product_id,
                                topping1_id=item.topping1_id,
                                topping2_id=item.topping2_id,
                                quantity=item.quantity,
                            )
                        )
                        await session.flush()
        except STORE_ERRORS as e:
            logger.exception(
                "Order transaction rolled back: project_id=%s user_id=%s",
                order_in.project_id,
                order_in.user_id,
            )
            raise TransactionError("Failed to save order", details=str(e)) from e

        logger.info(
            "Order %s saved: project_id=%s user_id=%s items=%s",
            order_id,
            order_in.project_id,
            order_in.user_id,
            len(order_in.items),
        )
        return order_id


async def get_order_lines(db: Database) -> List[OrderLineView]:
    """
    Плоский список позиций всех заказов с названиями продукта и топпингов.
    Сортировка: пользователь, заказ, позиция.
    """
    topping1 = aliased(Topping)
    topping2 = aliased(Topping)

    stmt = (
        select(
            Order.user_id,
            Product.product_name,
            topping1.topping_name.label("topping1_name"),
            topping2.topping_name.label("topping2_name"),
            Item.quantity,
        )
        .join(Item, Item.order_id == Order.order_id)
        .join(Product, Product.id == Item.product_id)
        .outerjoin(topping1, topping1.topping_id == Item.topping1_id)
        .outerjoin(topping2, topping2.topping_id == Item.topping2_id)
        .order_by(Order.user_id, Order.order_id, Item.item_id)
    )

    try:
        rows = await db.fetch_all(stmt)
    except STORE_ERRORS as e:
        logger.exception("Order lines query failed")
        raise QueryError("Failed to fetch orders", details=str(e)) from e

    return [OrderLineView.model_validate(dict(row)) for row in rows]
