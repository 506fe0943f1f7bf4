import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.concurrency import run_in_threadpool
from typing import Optional
from ..models import FacturasPage
from ..database import DatabaseClient, FacturasNotFoundError, FacturasError, get_db
from ..query import FacturaQuery, run_query

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/facturas",
    tags=["facturas"]
)


@router.get("", response_model=FacturasPage)
async def list_facturas(
    search: Optional[str] = Query(None, description="Substring of the electronic NCF"),
    rnc: Optional[str] = Query(None, description="Substring of the buyer RNC"),
    page: Optional[str] = Query(None, description="Page number, 1-indexed (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 50)"),
    db: DatabaseClient = Depends(get_db),
):
    # page/limit arrive as raw strings so bad values fall back to defaults instead of a 422
    query = FacturaQuery.from_params(search=search, rnc=rnc, page=page, limit=limit)
    try:
        # file read and JSON parse block, keep them off the event loop
        facturas = await run_in_threadpool(db.load_facturas)
        return run_query(facturas, query)
    except FacturasNotFoundError as e:
        logger.warning("%s", e)
        raise HTTPException(
            status_code=404,
            detail="Archivo no encontrado"
        )
    except FacturasError as e:
        logger.error("Error al leer el archivo: %s", e)
        raise HTTPException(
            status_code=500,
            detail="Error interno del servidor"
        )
    except Exception:
        logger.exception("Error procesando facturas")
        raise HTTPException(
            status_code=500,
            detail="Error interno del servidor"
        )
