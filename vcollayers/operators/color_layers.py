import bpy
from bpy.props import BoolProperty, EnumProperty, FloatVectorProperty, StringProperty

from vcollayers import config
from vcollayers.reg.base_reg import RegisterBase
from vcollayers.util import color_layers
from vcollayers.util import viewport


COLOR_TYPE_ITEMS = [
    ('ATTRIBUTE', "Attribute", "Show the active color attribute (Blender 3.2+)"),
    ('VERTEX', "Vertex", "Show the active vertex color layer (before Blender 3.2)"),
    ('MATERIAL', "Material", "Show the material color"),
    ('TEXTURE', "Texture", "Show the active image texture"),
    ('OBJECT', "Object", "Show the object color"),
    ('RANDOM', "Random", "Random color per object"),
    ('SINGLE', "Single", "One color for every object"),
]


def _target_meshes(context) -> list[bpy.types.Object]:
    selected = getattr(context, "selected_objects", None) or []
    objs = [obj for obj in selected if obj.type == 'MESH']
    if objs:
        return objs
    obj = getattr(context, "active_object", None)
    if obj is not None and obj.type == 'MESH':
        return [obj]
    return []


def _leave_edit_mode(context) -> str | None:
    """Switch to Object Mode so mesh data matches the edit session."""
    obj = getattr(context, "active_object", None)
    if obj is None or obj.mode != 'EDIT':
        return None
    bpy.ops.object.mode_set(mode='OBJECT')
    return 'EDIT'


def _restore_mode(mode: str | None) -> None:
    if mode:
        bpy.ops.object.mode_set(mode=mode)


def _show_in_viewport(context) -> None:
    color_type = config.pref_value(context, "viewport_color_type", config.DEFAULT_VIEWPORT_COLOR_TYPE)
    viewport.set_viewport_color_type(getattr(context, "screen", None), color_type)


class VCL_OT_add_color_layer(bpy.types.Operator):
    """Create a color layer if missing and paint the selected vertices."""

    bl_idname = "vcollayers.add_color_layer"
    bl_label = "Add Color Layer"
    bl_options = {'REGISTER', 'UNDO'}

    # not remembered between calls, invoke fills them from the preferences
    layer_name: StringProperty(name="Name", default=config.DEFAULT_LAYER_NAME, options={'SKIP_SAVE'})
    color: FloatVectorProperty(
        name="Color",
        subtype='COLOR',
        size=4,
        min=0.0,
        max=1.0,
        default=config.DEFAULT_COLOR,
        options={'SKIP_SAVE'},
    )
    only_selected: BoolProperty(
        name="Only Selected",
        description="Paint only selected vertices; otherwise fill the whole layer",
        default=True,
    )
    make_active: BoolProperty(name="Make Active", default=True)
    show_in_viewport: BoolProperty(
        name="Show in Viewport",
        description="Switch the viewport to display vertex colors",
        default=True,
    )

    @classmethod
    def poll(cls, context):
        return bool(_target_meshes(context))

    def invoke(self, context, event):
        if not self.properties.is_property_set("layer_name"):
            self.layer_name = config.pref_value(context, "default_layer_name", config.DEFAULT_LAYER_NAME)
        if not self.properties.is_property_set("color"):
            self.color = config.pref_value(context, "default_color", config.DEFAULT_COLOR)
        return self.execute(context)

    def execute(self, context):
        if not self.layer_name:
            self.report({'ERROR'}, "Layer name is empty")
            return {'CANCELLED'}

        mode = _leave_edit_mode(context)
        painted = 0
        try:
            for obj in _target_meshes(context):
                mesh = obj.data
                color_layers.ensure_color_layer(
                    mesh, self.layer_name, config.DEFAULT_DOMAIN, config.DEFAULT_DATA_TYPE
                )
                painted += color_layers.paint_color_layer(
                    mesh, self.layer_name, self.color, only_selected=self.only_selected
                )
                if self.make_active:
                    color_layers.set_active_color_layer(mesh, self.layer_name)
        except color_layers.ColorLayerError as exc:
            self.report({'ERROR'}, str(exc))
            return {'CANCELLED'}
        finally:
            _restore_mode(mode)

        if self.show_in_viewport:
            _show_in_viewport(context)
        self.report({'INFO'}, f"Painted {painted} elements on '{self.layer_name}'")
        return {'FINISHED'}


class VCL_OT_set_active_color_layer(bpy.types.Operator):
    """Make a color layer active on the selected meshes."""

    bl_idname = "vcollayers.set_active_color_layer"
    bl_label = "Set Active Color Layer"
    bl_options = {'REGISTER', 'UNDO'}

    layer_name: StringProperty(name="Name")
    render: BoolProperty(
        name="Render",
        description="Also use the layer for rendering and export",
        default=False,
    )
    show_in_viewport: BoolProperty(name="Show in Viewport", default=True)

    @classmethod
    def poll(cls, context):
        return bool(_target_meshes(context))

    def execute(self, context):
        changed = 0
        try:
            for obj in _target_meshes(context):
                if not color_layers.has_color_layer(obj.data, self.layer_name):
                    continue
                color_layers.set_active_color_layer(obj.data, self.layer_name, render=self.render)
                changed += 1
        except color_layers.ColorLayerError as exc:
            self.report({'ERROR'}, str(exc))
            return {'CANCELLED'}

        if changed == 0:
            self.report({'ERROR'}, f"No selected mesh has a color layer named '{self.layer_name}'")
            return {'CANCELLED'}

        if self.show_in_viewport:
            _show_in_viewport(context)
        else:
            viewport.tag_redraw(getattr(context, "screen", None))
        self.report({'INFO'}, f"'{self.layer_name}' active on {changed} object(s)")
        return {'FINISHED'}


class VCL_OT_remove_color_layers(bpy.types.Operator):
    """Remove color layers from the selected meshes and redraw the viewport."""

    bl_idname = "vcollayers.remove_color_layers"
    bl_label = "Remove Color Layers"
    bl_options = {'REGISTER', 'UNDO'}

    layer_name: StringProperty(name="Name")
    all_layers: BoolProperty(name="All Layers", default=False)

    @classmethod
    def poll(cls, context):
        return bool(_target_meshes(context))

    def execute(self, context):
        if not self.all_layers and not self.layer_name:
            self.report({'ERROR'}, "Give a layer name or enable All Layers")
            return {'CANCELLED'}

        names = None if self.all_layers else [self.layer_name]
        refresh = config.pref_value(context, "refresh_after_remove", config.REFRESH_AFTER_REMOVE)

        mode = _leave_edit_mode(context)
        removed = 0
        try:
            for obj in _target_meshes(context):
                gone = color_layers.remove_color_layers(obj.data, names)
                if gone and refresh:
                    viewport.refresh_object_display(obj)
                removed += len(gone)
        except color_layers.ColorLayerError as exc:
            self.report({'ERROR'}, str(exc))
            return {'CANCELLED'}
        finally:
            _restore_mode(mode)

        if removed == 0:
            self.report({'WARNING'}, "Nothing to remove")
            return {'CANCELLED'}

        viewport.tag_redraw(getattr(context, "screen", None))
        self.report({'INFO'}, f"Removed {removed} color layer(s)")
        return {'FINISHED'}


class VCL_OT_set_viewport_color_type(bpy.types.Operator):
    """Choose what the Solid viewport shows as object color."""

    bl_idname = "vcollayers.set_viewport_color_type"
    bl_label = "Set Viewport Color"
    bl_options = {'REGISTER'}

    color_type: EnumProperty(name="Color", items=COLOR_TYPE_ITEMS, default='ATTRIBUTE')

    def execute(self, context):
        changed = viewport.set_viewport_color_type(getattr(context, "screen", None), self.color_type)
        if changed == 0:
            self.report({'WARNING'}, "No 3D viewport to update")
            return {'CANCELLED'}
        self.report({'INFO'}, f"Viewport color: {self.color_type}")
        return {'FINISHED'}


classes = (
    VCL_OT_add_color_layer,
    VCL_OT_set_active_color_layer,
    VCL_OT_remove_color_layers,
    VCL_OT_set_viewport_color_type,
)


class ColorLayerOps(RegisterBase):
    @classmethod
    def register(cls) -> None:
        for c in classes:
            bpy.utils.register_class(c)

    @classmethod
    def unregister(cls) -> None:
        for c in reversed(classes):
            bpy.utils.unregister_class(c)
