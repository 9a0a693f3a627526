import bpy

from vcollayers.util import color_layers


class VCL_PT_color_layers(bpy.types.Panel):
    bl_idname = "VCL_PT_color_layers"
    bl_label = "Color Layers"
    bl_space_type = 'VIEW_3D'
    bl_region_type = 'UI'
    bl_category = "VCol"

    @classmethod
    def poll(cls, context):
        obj = context.active_object
        return obj is not None and obj.type == 'MESH'

    def draw(self, context):
        layout = self.layout
        mesh = context.active_object.data

        try:
            names = color_layers.layer_names(mesh)
        except color_layers.ColorLayerError as exc:
            layout.label(text=str(exc), icon='ERROR')
            return

        active = color_layers.active_color_layer_name(mesh)
        render = color_layers.render_color_layer_name(mesh)

        box = layout.box()
        if not names:
            box.label(text="No color layers", icon='INFO')
        for name in names:
            row = box.row(align=True)
            icon = 'RADIOBUT_ON' if name == active else 'RADIOBUT_OFF'
            op = row.operator("vcollayers.set_active_color_layer", text=name, icon=icon, emboss=False)
            op.layer_name = name
            op = row.operator(
                "vcollayers.set_active_color_layer",
                text="",
                icon='RESTRICT_RENDER_OFF' if name == render else 'RESTRICT_RENDER_ON',
            )
            op.layer_name = name
            op.render = True
            op = row.operator("vcollayers.remove_color_layers", text="", icon='X')
            op.layer_name = name
            op.all_layers = False

        col = layout.column(align=True)
        col.operator("vcollayers.add_color_layer", icon='ADD')
        op = col.operator("vcollayers.remove_color_layers", text="Remove All", icon='TRASH')
        op.all_layers = True

        layout.separator()
        row = layout.row(align=True)
        row.operator_menu_enum("vcollayers.set_viewport_color_type", "color_type", text="Viewport Color")


classes = (
    VCL_PT_color_layers,
)


def register():
    for cls in classes:
        bpy.utils.register_class(cls)


def unregister():
    for cls in reversed(classes):
        bpy.utils.unregister_class(cls)
