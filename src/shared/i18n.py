from django.utils import translation


def active_language(default="es"):
    return (translation.get_language() or default).split("-")[0]


def localized(obj, field, lang=None):
    """Return ``obj.<field>_<lang>``, falling back to the Spanish column."""
    lang = lang or active_language()
    value = getattr(obj, f"{field}_{lang}", "") or ""
    return value or getattr(obj, f"{field}_es", "") or ""
