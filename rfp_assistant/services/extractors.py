import re
from datetime import datetime, timedelta
from typing import List, Optional

from rfp_assistant.schemas.rfp import RFPItem

DEFAULT_BUDGET = 10000
DEFAULT_DELIVERY_DAYS = 30
DEFAULT_PAYMENT_TERMS = "Net 30"
DEFAULT_WARRANTY = "1 year minimum"
SPECIFIED_WARRANTY = "As specified"

# Palabras que siguen a una cantidad pero no son artículos
STOPLIST = {"days", "weeks", "months", "years", "year", "gb", "inch"}

BUDGET_RE = re.compile(r"\$?(\d[\d,]*)")
DAYS_RE = re.compile(r"(\d+)\s*days?", re.IGNORECASE)
WEEKS_RE = re.compile(r"(\d+)\s*weeks?", re.IGNORECASE)
ITEM_RE = re.compile(r"(\d+)\s+([a-zA-Z]+(?:\s+[a-zA-Z]+)?)")
RAM_RE = re.compile(r"(\d+)\s*GB\s*RAM", re.IGNORECASE)
INCH_RE = re.compile(r"(\d+)[- ]?inch", re.IGNORECASE)

PAYMENT_TERMS = [("net 30", "Net 30"), ("net 45", "Net 45")]


def extract_budget(text: str) -> int:
    """
    Primer número del texto (con o sin "$"), sin separadores de miles.
    No da prioridad a los importes marcados con moneda: en
    "20 chairs ... $15,000" devuelve 20.
    """
    m = BUDGET_RE.search(text or "")
    if not m:
        return DEFAULT_BUDGET
    value = int(m.group(1).replace(",", ""))
    return value if value > 0 else DEFAULT_BUDGET


def max_delivery_days(now: datetime) -> int:
    # Mayor plazo que sigue siendo una fecha representable
    return (datetime.max.replace(tzinfo=now.tzinfo) - now).days - 1


def extract_delivery_days(text: str, max_days: Optional[int] = None) -> int:
    def usable(n: int) -> bool:
        return n > 0 and (max_days is None or n <= max_days)

    t = text or ""
    days = DAYS_RE.search(t)
    if days and usable(int(days.group(1))):
        return int(days.group(1))
    weeks = WEEKS_RE.search(t)
    if weeks and usable(int(weeks.group(1)) * 7):
        return int(weeks.group(1)) * 7
    return DEFAULT_DELIVERY_DAYS


def extract_delivery_deadline(text: str, now: datetime) -> datetime:
    return now + timedelta(days=extract_delivery_days(text, max_days=max_delivery_days(now)))


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _is_stopword(name: str) -> bool:
    lowered = name.lower()
    return lowered in STOPLIST or lowered.split()[0] in STOPLIST


def extract_items(text: str) -> List[RFPItem]:
    items: List[RFPItem] = []
    for m in ITEM_RE.finditer(text or ""):
        quantity = int(m.group(1))
        name = m.group(2)
        if quantity > 0 and not _is_stopword(name):
            items.append(RFPItem(name=_capitalize(name), quantity=quantity))
    # Nunca vacío: artículo genérico
    if not items:
        items.append(RFPItem(name="Item", quantity=1, specifications="As specified"))
    return items


def attach_specifications(items: List[RFPItem], text: str) -> List[RFPItem]:
    """
    Asigna especificaciones por posición, no por nombre:
    RAM al primer artículo, pulgadas al segundo.
    """
    out = list(items)
    ram = RAM_RE.search(text or "")
    size = INCH_RE.search(text or "")
    if ram and len(out) > 0:
        out[0] = out[0].model_copy(update={"specifications": f"{ram.group(1)}GB RAM"})
    if size and len(out) > 1:
        out[1] = out[1].model_copy(update={"specifications": f"{size.group(1)}-inch"})
    return out


def extract_payment_terms(text: str) -> str:
    lowered = (text or "").lower()
    for needle, terms in PAYMENT_TERMS:
        if needle in lowered:
            return terms
    return DEFAULT_PAYMENT_TERMS


def extract_warranty(text: str) -> str:
    return SPECIFIED_WARRANTY if "warranty" in (text or "").lower() else DEFAULT_WARRANTY


def derive_title(items: List[RFPItem]) -> str:
    return " & ".join(i.name for i in items) + " Procurement"
