import logging
from typing import Iterable, List, Mapping

from sqlalchemy import and_, select

from pos_backend.db.session import STORE_ERRORS, Database
from pos_backend.exceptions import CatalogValidationError, NotFoundError, QueryError
from pos_backend.models import Product, Project, Topping
from pos_backend.schemas.catalog import ProductView, ToppingView

logger = logging.getLogger(__name__)


def group_catalog_rows(rows: Iterable[Mapping]) -> List[ProductView]:
    """
    Сворачивает плоские строки product LEFT JOIN topping в список продуктов.
    Каждый продукт встречается один раз, toppings всегда список (может быть пустым).
    Порядок продуктов и топпингов сохраняется как в строках.
    """
    products: dict[int, ProductView] = {}
    seen_toppings: dict[int, set] = {}

    for row in rows:
        product = products.get(row["id"])
        if product is None:
            product = ProductView(
                id=row["id"],
                product_name=row["product_name"],
                product_price=row["product_price"],
                topping_group=row["topping_group"],
                topping_limit=row["topping_limit"] or 0,
                toppings=[],
            )
            products[row["id"]] = product
            seen_toppings[row["id"]] = set()

        # LEFT JOIN без совпадения даёт NULL вместо топпинга
        topping_id = row["topping_id"]
        if topping_id is None or topping_id in seen_toppings[row["id"]]:
            continue
        seen_toppings[row["id"]].add(topping_id)
        product.toppings.append(
            ToppingView(
                topping_id=topping_id,
                topping_name=row["topping_name"],
                topping_price=row["topping_price"],
            )
        )

    return list(products.values())


class CatalogComposer:
    """
    Каталог проекта: продукты с топпингами своей группы.
    Только чтение, без кэша и без транзакции.
    """

    def __init__(self, db: Database):
        self.db = db

    async def get_catalog(self, project_name: str) -> List[ProductView]:
        if not project_name:
            raise CatalogValidationError("Project name must not be empty")

        try:
            project_rows = await self.db.fetch_all(
                select(Project.project_id).where(Project.project_name == project_name)
            )
            if not project_rows:
                raise NotFoundError(f"Project '{project_name}' not found")
            project_id = project_rows[0]["project_id"]

            # Группа топпингов совпадает только внутри одного проекта
            stmt = (
                select(
                    Product.id,
                    Product.product_name,
                    Product.product_price,
                    Product.topping_group,
                    Product.topping_limit,
                    Topping.topping_id,
                    Topping.topping_name,
                    Topping.topping_price,
                )
                .outerjoin(
                    Topping,
                    and_(
                        Topping.topping_group == Product.topping_group,
                        Topping.project_id == Product.project_id,
                    ),
                )
                .where(Product.project_id == project_id)
                .order_by(Product.id, Topping.topping_id)
            )
            rows = await self.db.fetch_all(stmt)
        except STORE_ERRORS as e:
            logger.exception("Catalog query failed for project %r", project_name)
            raise QueryError("Failed to fetch products", details=str(e)) from e

        if not rows:
            raise NotFoundError(f"No products found for project '{project_name}'")

        return group_catalog_rows(rows)
