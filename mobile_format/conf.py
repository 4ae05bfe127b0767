import re
from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

MOBILE_FORMAT = "mobile"
DEFAULT_FORMAT = "html"

# Lower-cased user-agent fragments that identify a handheld browser.
MOBILE_USER_AGENTS = (
    "palm|blackberry|nokia|phone|midp|mobi|symbian|chtml|ericsson|minimo|"
    "audiovox|motorola|samsung|telit|upg1|windows ce|ucweb|astel|plucker|"
    "x320|x240|j2me|sgh|portable|sprint|docomo|kddi|softbank|android|mmp|"
    "pdxgw|netfront|xiino|vodafone|portalmmm|sagem|mot-|sie-|ipod|up\\.b|"
    "webos|amoi|novarra|cdm|alcatel|pocket|ipad|iphone|mobileexplorer|mobile"
)

DEFAULTS = {
    "FALL_BACK": DEFAULT_FORMAT,
    "SKIP_XHR_REQUESTS": True,
    "USER_AGENTS": None,
    "SKIP_PARAMETER": "skip_mobile",
    "FORMAT_PARAMETER": "format",
    "SESSION_KEY": "mobile_override",
}


def get_setting(name):
    user_settings = getattr(settings, "MOBILE_FORMAT", {})
    unknown = set(user_settings) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown MOBILE_FORMAT settings: {', '.join(sorted(unknown))}"
        )
    return user_settings.get(name, DEFAULTS[name])


@lru_cache(maxsize=8)
def _compile(pattern):
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ImproperlyConfigured(
            f"MOBILE_FORMAT['USER_AGENTS'] is not a valid pattern: {e}"
        ) from e


def user_agent_pattern():
    return _compile(get_setting("USER_AGENTS") or MOBILE_USER_AGENTS)


def clean_fall_back(fall_back):
    # False is an alias for None.
    if fall_back is None or fall_back is False:
        return None
    if not isinstance(fall_back, str) or not fall_back:
        raise ImproperlyConfigured(
            f"fall_back must be a format name or None, got {fall_back!r}"
        )
    if fall_back == MOBILE_FORMAT:
        raise ImproperlyConfigured("fall_back cannot be the mobile format itself")
    return fall_back


class MobileConfig:
    """Options that decide how a view answers mobile requests.

    ``fall_back`` is the format rendered when no ``.mobile`` template
    exists, ``None`` disables the fallback. ``skip_xhr_requests`` lets ajax
    calls through untouched, turn it off for ajax-driven mobile frameworks
    such as jQuery Mobile.
    """

    __slots__ = ("fall_back", "skip_xhr_requests")

    def __init__(self, fall_back=DEFAULT_FORMAT, skip_xhr_requests=True):
        object.__setattr__(self, "fall_back", clean_fall_back(fall_back))
        object.__setattr__(self, "skip_xhr_requests", bool(skip_xhr_requests))

    def __setattr__(self, name, value):
        raise AttributeError("MobileConfig is read-only")

    def __eq__(self, other):
        if not isinstance(other, MobileConfig):
            return NotImplemented
        return (self.fall_back, self.skip_xhr_requests) == (
            other.fall_back,
            other.skip_xhr_requests,
        )

    def __hash__(self):
        return hash((self.fall_back, self.skip_xhr_requests))

    def __repr__(self):
        return (
            f"MobileConfig(fall_back={self.fall_back!r}, "
            f"skip_xhr_requests={self.skip_xhr_requests!r})"
        )

    def replace(self, **options):
        values = {
            "fall_back": self.fall_back,
            "skip_xhr_requests": self.skip_xhr_requests,
        }
        values.update(options)
        return MobileConfig(**values)

    @classmethod
    def from_settings(cls):
        return cls(
            fall_back=get_setting("FALL_BACK"),
            skip_xhr_requests=get_setting("SKIP_XHR_REQUESTS"),
        )
