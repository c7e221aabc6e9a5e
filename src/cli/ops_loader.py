"""Load and validate a YAML operations file. Used by the cli runner."""

from pathlib import Path

import yaml

OPERATIONS = ("add", "update", "delete", "get")
CONTACT_FIELDS = ("first_name", "last_name", "phone", "address")


def _as_text(value) -> str | None:
    # Unquoted YAML numbers load as ints; contacts hold text. Phones with a
    # leading zero must be quoted or YAML may read them as octal.
    if value is None:
        return None
    return str(value)


def load_operations(path: Path) -> list[dict]:
    """Load operations YAML and return the list of operations. Validates structure.

    Each operation is a dict with "op" and "contact_id", plus contact fields
    for add (all required) and update (any subset).
    """
    raw = path.read_text(encoding="utf-8")
    doc = yaml.safe_load(raw)
    if not isinstance(doc, dict):
        raise ValueError("Operations YAML must be a dict")
    ops = doc.get("operations")
    if not isinstance(ops, list) or not ops:
        raise ValueError("Operations YAML must have a non-empty 'operations' list")

    out = []
    for index, item in enumerate(ops):
        if not isinstance(item, dict):
            raise ValueError(f"Operation {index} must be a dict")
        op = item.get("op")
        if op not in OPERATIONS:
            raise ValueError(
                f"Operation {index} has unknown op {op!r} (expected one of {', '.join(OPERATIONS)})"
            )
        if "contact_id" not in item:
            raise ValueError(f"Operation {index} ({op}) must have 'contact_id'")
        unknown = set(item) - {"op", "contact_id", *CONTACT_FIELDS}
        if unknown:
            raise ValueError(
                f"Operation {index} ({op}) has unknown keys: {', '.join(sorted(unknown))}"
            )
        if op == "add":
            missing = [f for f in CONTACT_FIELDS if f not in item]
            if missing:
                raise ValueError(
                    f"Operation {index} (add) is missing: {', '.join(missing)}"
                )
        parsed = {"op": op, "contact_id": _as_text(item["contact_id"])}
        for name in CONTACT_FIELDS:
            if name in item:
                parsed[name] = _as_text(item[name])
        out.append(parsed)
    return out
