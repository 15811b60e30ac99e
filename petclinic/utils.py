# petclinic/utils.py
from typing import Any, Dict, Optional
from datetime import date, datetime

def to_id(doc: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Convierte _id -> id y las fechas guardadas como texto ISO a date.
    Si doc es None, devuelve {}.
    """
    if doc is None:
        return {}
    d = dict(doc)

    if "_id" in d:
        d["id"] = d.pop("_id")

    if isinstance(d.get("birth_date"), str):
        d["birth_date"] = date.fromisoformat(d["birth_date"])
    elif isinstance(d.get("birth_date"), datetime):
        d["birth_date"] = d["birth_date"].date()

    return d

def date_to_str(value: Optional[date]) -> Optional[str]:
    """Mongo no guarda `date` sin hora: se persiste como YYYY-MM-DD."""
    return value.isoformat() if value is not None else None
