from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pos_backend.config import settings
from pos_backend.crud.order import OrderTransactionManager, get_order_lines
from pos_backend.db.deps import get_database, get_order_manager
from pos_backend.db.session import Database
from pos_backend.exceptions import OrderValidationError, PosError, TransactionError
from pos_backend.schemas.order import OrderLineView, OrderSubmit, OrderSubmitResult

router = APIRouter(tags=["orders"])


@router.get("/api/orders", response_model=List[OrderLineView])
async def list_order_lines(db: Database = Depends(get_database)):
    """
    Все позиции заказов в плоском виде: пользователь, продукт, топпинги, количество.
    """
    try:
        return await get_order_lines(db)
    except PosError as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})


@router.post("/api/orders", response_model=OrderSubmitResult)
@router.post("/receive", response_model=OrderSubmitResult)
async def submit_order_endpoint(
    order_in: OrderSubmit,
    manager: OrderTransactionManager = Depends(get_order_manager),
):
    """
    Принимает заказ: шапка + позиции сохраняются атомарно.
    Возвращает id созданного заказа.
    """
    try:
        order_id = await manager.submit_order(order_in)
    except OrderValidationError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except TransactionError as e:
        # диагностику БД отдаём только в DEBUG
        content = {"error": e.message, "details": e.details if settings.DEBUG else None}
        return JSONResponse(status_code=500, content=content)

    return OrderSubmitResult(order_id=order_id)
