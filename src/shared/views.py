from django.conf import settings
from django.http import HttpResponseRedirect
from django.utils import translation
from django.utils.http import url_has_allowed_host_and_scheme
from urllib.parse import urlsplit, urlunsplit

SESSION_LANG_KEY = "django_language"

# Paths served outside the /<locale>/ tree of the public site.
UNLOCALIZED_PREFIXES = ("/api/", "/admin/", "/dashboard", "/student")


def _normalize_path_for_lang(path, lang, allowed_codes):
    if not path:
        path = "/"
    if not path.startswith("/"):
        path = "/" + path
    if path.startswith(UNLOCALIZED_PREFIXES):
        return path
    rest = path
    for code in allowed_codes:
        if path == f"/{code}":
            rest = "/"
            break
        if path.startswith(f"/{code}/"):
            rest = path[len(code) + 1:]
            break
    if rest == "/":
        return f"/{lang}/"
    return f"/{lang}{rest}"


def setlang_get(request):
    lang = (request.GET.get("language") or "").lower().split("-")[0]
    nxt = request.GET.get("next") or "/"
    if not url_has_allowed_host_and_scheme(nxt, allowed_hosts={request.get_host()}):
        nxt = "/"
    allowed = [code for code, _ in getattr(settings, "LANGUAGES", [])]
    default_lang = settings.LANGUAGE_CODE.split("-")[0]
    if lang not in allowed:
        lang = default_lang
    parts = urlsplit(nxt)
    new_path = _normalize_path_for_lang(parts.path, lang, allowed)
    new_url = urlunsplit((parts.scheme, parts.netloc, new_path, parts.query, parts.fragment))
    response = HttpResponseRedirect(new_url or "/")
    if hasattr(request, "session"):
        request.session[SESSION_LANG_KEY] = lang
    response.set_cookie(
        settings.LANGUAGE_COOKIE_NAME,
        lang,
        max_age=getattr(settings, "LANGUAGE_COOKIE_AGE", None),
        path=getattr(settings, "LANGUAGE_COOKIE_PATH", "/"),
        domain=getattr(settings, "LANGUAGE_COOKIE_DOMAIN", None),
        secure=getattr(settings, "LANGUAGE_COOKIE_SECURE", False),
        httponly=getattr(settings, "LANGUAGE_COOKIE_HTTPONLY", False),
        samesite=getattr(settings, "LANGUAGE_COOKIE_SAMESITE", "Lax"),
    )
    translation.activate(lang)
    request.LANGUAGE_CODE = lang
    return response
