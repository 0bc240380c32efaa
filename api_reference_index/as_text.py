"""Logic for reading raw element values from a content export."""


def element_value(v: object) -> object:
    """Unwrap a delivery-style element (``{"type": ..., "value": ...}``)."""
    if isinstance(v, dict) and "value" in v:
        return v["value"]
    return v


def as_text(v: object) -> str:
    """Convert an element value to a string, handling lists and None.

    Status codes and versions are often exported as numbers, so scalars are
    stringified rather than rejected.
    """
    v = element_value(v)
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, list):
        return ", ".join(as_text(x) for x in v if as_text(x))
    return str(v).strip()
