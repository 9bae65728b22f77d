from typing import List

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from pos_backend.crud.catalog import CatalogComposer
from pos_backend.db.deps import get_catalog_composer
from pos_backend.exceptions import PosError
from pos_backend.schemas.catalog import ProductView

router = APIRouter(prefix="/api/products", tags=["catalog"])


@router.get("/{project_name}", response_model=List[ProductView])
async def get_products(
    project_name: str = Path(..., description="Название проекта (точное совпадение)"),
    composer: CatalogComposer = Depends(get_catalog_composer),
):
    """
    Возвращает продукты проекта с топпингами их группы.
    """
    try:
        return await composer.get_catalog(project_name)
    except PosError as e:
        return JSONResponse(status_code=e.status_code, content={"message": e.message})
