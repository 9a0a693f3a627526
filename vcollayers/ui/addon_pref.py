import bpy

from vcollayers import config
from vcollayers.operators.color_layers import COLOR_TYPE_ITEMS


class VCL_Preferences(bpy.types.AddonPreferences):
    bl_idname = config.ADDON_ID

    default_layer_name: bpy.props.StringProperty(
        name="Default Layer Name",
        default=config.DEFAULT_LAYER_NAME,
    )
    default_color: bpy.props.FloatVectorProperty(
        name="Default Color",
        subtype='COLOR',
        size=4,
        min=0.0,
        max=1.0,
        default=config.DEFAULT_COLOR,
    )
    viewport_color_type: bpy.props.EnumProperty(
        name="Viewport Color",
        description="Color type shown after painting or changing the active layer",
        items=COLOR_TYPE_ITEMS,
        default=config.DEFAULT_VIEWPORT_COLOR_TYPE,
    )
    refresh_after_remove: bpy.props.BoolProperty(
        name="Refresh After Remove",
        description="Hide and show objects after removing layers so stale colors are not drawn",
        default=config.REFRESH_AFTER_REMOVE,
    )

    def draw(self, context):
        layout = self.layout
        col = layout.column(align=True)
        col.prop(self, "default_layer_name")
        col.prop(self, "default_color")
        col.separator()
        col.prop(self, "viewport_color_type")
        col.prop(self, "refresh_after_remove")


def register():
    bpy.utils.register_class(VCL_Preferences)


def unregister():
    bpy.utils.unregister_class(VCL_Preferences)
