from fastapi import Depends, Request

from pos_backend.crud.catalog import CatalogComposer
from pos_backend.crud.order import OrderTransactionManager
from pos_backend.db.session import Database


def get_database(request: Request) -> Database:
    """
    Пул создаётся в lifespan приложения и лежит в app.state.db.
    """
    return request.app.state.db


def get_catalog_composer(db: Database = Depends(get_database)) -> CatalogComposer:
    return CatalogComposer(db)


def get_order_manager(db: Database = Depends(get_database)) -> OrderTransactionManager:
    return OrderTransactionManager(db)
