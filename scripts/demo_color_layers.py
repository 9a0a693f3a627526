"""Walk through creating, activating and removing color layers.

    blender --background --python scripts/demo_color_layers.py
"""

import os
import sys

import bpy
import bmesh

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vcollayers.util import color_layers
from vcollayers.util import viewport


# Settings
OBJECT_NAME = "VColDemo"
LAYER_NAMES = ("Base", "Mask")
MASK_COLOR = (0.0, 0.0, 1.0, 1.0)


def _make_grid():
    mesh = bpy.data.meshes.new(f"{OBJECT_NAME}_Mesh")
    obj = bpy.data.objects.new(OBJECT_NAME, mesh)
    bpy.context.scene.collection.objects.link(obj)

    bm = bmesh.new()
    bmesh.ops.create_grid(bm, x_segments=4, y_segments=4, size=1.0)
    # select the left half so only those vertices get painted
    for v in bm.verts:
        v.select = v.co.x < 0.0
    bm.to_mesh(mesh)
    bm.free()
    return obj


def main():
    obj = _make_grid()
    mesh = obj.data

    for name in LAYER_NAMES:
        color_layers.ensure_color_layer(mesh, name)
    print("[Demo] layers:", color_layers.layer_names(mesh))

    painted = color_layers.paint_color_layer(mesh, "Mask", MASK_COLOR)
    print(f"[Demo] painted {painted} loops on 'Mask'")

    color_layers.set_active_color_layer(mesh, "Mask", render=True)
    changed = viewport.set_viewport_color_type(bpy.context.screen, 'ATTRIBUTE')
    print("[Demo] active:", color_layers.active_color_layer_name(mesh),
          "render:", color_layers.render_color_layer_name(mesh),
          "viewports:", changed)

    removed = color_layers.remove_color_layers(mesh, ["Mask"])
    viewport.refresh_object_display(obj)
    viewport.tag_redraw(bpy.context.screen)
    print("[Demo] removed:", removed, "active now:", color_layers.active_color_layer_name(mesh))


if __name__ == "__main__":
    main()
