# Defaults used when the add-on preferences are not available
# (e.g. the add-on was registered from a script instead of being enabled).

ADDON_ID = "vcollayers"

DEFAULT_LAYER_NAME = "Col"
DEFAULT_COLOR = (1.0, 0.0, 0.0, 1.0)
DEFAULT_DOMAIN = 'CORNER'
DEFAULT_DATA_TYPE = 'BYTE_COLOR'
DEFAULT_VIEWPORT_COLOR_TYPE = 'ATTRIBUTE'
REFRESH_AFTER_REMOVE = True


def get_prefs(context):
    """Return the add-on preferences, or None when the add-on is not enabled."""
    preferences = getattr(context, "preferences", None)
    if preferences is None:
        return None
    addon = preferences.addons.get(ADDON_ID)
    if addon is None:
        return None
    return addon.preferences


def pref_value(context, attr: str, default):
    prefs = get_prefs(context)
    if prefs is None:
        return default
    return getattr(prefs, attr, default)
