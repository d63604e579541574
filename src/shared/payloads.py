import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def normalize_payload(data, renames=None) -> dict:
    """Copy request data into a dict keyed by snake_case names.

    The dashboard front-end posts camelCase keys (``guestName``, ``checkIn``).
    ``renames`` maps normalized names onto serializer fields, e.g.
    ``{"room_id": "room"}``. A key already sent in snake_case wins over its
    camelCase alias.
    """
    renames = renames or {}
    result = {}
    for key, value in data.items():
        if not isinstance(key, str):
            continue
        name = snake_case(key)
        name = renames.get(name, name)
        if key == name or name not in result:
            result[name] = value
    return result
