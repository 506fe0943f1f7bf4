from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import RedirectResponse
from typing import Optional
from urllib.parse import urlencode
import logging

from ..config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["timbre"])

MISSING_PARAMS_MESSAGE = "Faltan parámetros requeridos"


def build_timbre_url(base_url: str, rnc_emisor: str, encf: str, monto_total: str, codigo_seguridad: str) -> str:
    """DGII ConsultaTimbreFC URL; values are only URL-encoded, never altered"""
    query = urlencode({
        "RncEmisor": rnc_emisor,
        "ENCF": encf,
        "MontoTotal": monto_total,
        "CodigoSeguridad": codigo_seguridad,
    })
    return f"{base_url.rstrip('?')}?{query}"


@router.get("/api/consultatimbrefc")
async def consulta_timbre_fc(
    rncemisor: Optional[str] = Query(None, description="RNC of the issuer"),
    encf: Optional[str] = Query(None, description="Electronic NCF"),
    montototal: Optional[str] = Query(None, description="Invoice total amount"),
    codigoseguridad: Optional[str] = Query(None, description="Security code printed on the invoice"),
):
    if not rncemisor or not encf or not montototal or not codigoseguridad:
        raise HTTPException(status_code=400, detail=MISSING_PARAMS_MESSAGE)

    url = build_timbre_url(get_settings().dgii_timbre_url, rncemisor, encf, montototal, codigoseguridad)
    logger.info("Redirecting timbre lookup for ENCF %s", encf)
    return RedirectResponse(url, status_code=302)
