from pydantic import BaseModel
from typing import List, Optional, Dict, Any, Tuple
from datetime import datetime, timezone

# Records come from different exporters, so every logical field may use
# either lowercase-first or PascalCase keys. Order matters: first hit wins.
NCF_KEYS = ("ncfElectronico", "NcfElectronico")
RNC_COMPRADOR_KEYS = ("rncComprador", "RncComprador")
FECHA_EMISION_KEYS = ("fechaEmision", "FechaEmision")

FECHA_FORMATS = ("%d-%m-%Y", "%d/%m/%Y", "%Y/%m/%d", "%d-%m-%Y %H:%M:%S", "%d/%m/%Y %H:%M:%S")


def get_field(record: Dict[str, Any], keys: Tuple[str, ...], default: Any = None) -> Any:
    """Return the first non-null value among `keys`, else `default`"""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def get_ncf(record: Dict[str, Any]) -> str:
    return _as_text(get_field(record, NCF_KEYS, ""))


def get_rnc_comprador(record: Dict[str, Any]) -> str:
    return _as_text(get_field(record, RNC_COMPRADOR_KEYS, ""))


def get_fecha_emision(record: Dict[str, Any]) -> Any:
    return get_field(record, FECHA_EMISION_KEYS)


def parse_fecha(value: Any) -> Optional[datetime]:
    """
    Parse an issuance date into a naive UTC datetime.

    Accepts ISO-8601 (including a trailing Z), the dd-mm-YYYY style used
    by DGII exports, and numbers as epoch milliseconds. Returns None for
    anything else.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    parsed = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in FECHA_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class FacturasPage(BaseModel):
    total: int
    page: int
    limit: int
    data: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    facturas_file: str
    file_present: bool
    total_facturas: Optional[int] = None
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
