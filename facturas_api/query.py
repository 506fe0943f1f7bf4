"""
Filter, sort and paginate facturas in memory.

Processing order is fixed: search filter, rnc filter, sort by issuance date
(newest first), then slice the requested page.
"""

import re
from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Callable

from .models import get_ncf, get_rnc_comprador, get_fecha_emision, parse_fecha

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50

# ASCII digits only; int() alone would also take "1_0" and full-width digits
_DIGITS = re.compile(r"[0-9]+")


def _parse_positive_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    text = str(raw).strip()
    if not _DIGITS.fullmatch(text):
        return default
    value = int(text)
    return value if value > 0 else default


def parse_page(raw: Optional[str]) -> int:
    return _parse_positive_int(raw, DEFAULT_PAGE)


def parse_limit(raw: Optional[str]) -> int:
    return _parse_positive_int(raw, DEFAULT_LIMIT)


@dataclass(frozen=True)
class FacturaQuery:
    search: str = ""
    rnc: str = ""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        search: Optional[str] = None,
        rnc: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "FacturaQuery":
        return cls(
            search=(search or "").strip(),
            rnc=(rnc or "").strip(),
            page=parse_page(page),
            limit=parse_limit(limit),
        )


def _contains(getter: Callable[[Dict[str, Any]], str], needle: str) -> Callable[[Dict[str, Any]], bool]:
    return lambda factura: needle in getter(factura).strip()


def filter_facturas(facturas: List[Dict[str, Any]], query: FacturaQuery) -> List[Dict[str, Any]]:
    result = facturas
    if query.search:
        result = list(filter(_contains(get_ncf, query.search), result))
    if query.rnc:
        result = list(filter(_contains(get_rnc_comprador, query.rnc), result))
    return result


def sort_by_fecha_desc(facturas: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Newest first; undated or unparseable records go last in input order"""
    dated = []
    undated = []
    for factura in facturas:
        fecha = parse_fecha(get_fecha_emision(factura))
        if fecha is None:
            undated.append(factura)
        else:
            dated.append((fecha, factura))

    # sort() is stable with reverse=True as well, so ties keep input order
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [factura for _, factura in dated] + undated


def paginate(facturas: List[Dict[str, Any]], page: int, limit: int) -> List[Dict[str, Any]]:
    start_index = (page - 1) * limit
    end_index = start_index + limit
    return facturas[start_index:end_index]


def run_query(facturas: List[Dict[str, Any]], query: FacturaQuery) -> Dict[str, Any]:
    # total is the size of the whole file, not of the filtered set
    total = len(facturas)

    filtered = filter_facturas(facturas, query)
    ordered = sort_by_fecha_desc(filtered)
    data = paginate(ordered, query.page, query.limit)

    return {
        "total": total,
        "page": query.page,
        "limit": query.limit,
        "data": data,
    }
