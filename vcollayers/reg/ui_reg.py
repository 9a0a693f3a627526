import vcollayers.ui.addon_pref as addon_pref
import vcollayers.ui.color_layers_panel as color_layers_panel
from .base_reg import RegisterBase


class UIRegister(RegisterBase):
    """Register/unregister preferences and the sidebar panel."""

    @classmethod
    def register(cls) -> None:
        addon_pref.register()
        color_layers_panel.register()

    @classmethod
    def unregister(cls) -> None:
        color_layers_panel.unregister()
        addon_pref.unregister()
