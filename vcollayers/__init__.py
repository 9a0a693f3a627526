bl_info = {
    "name": "VColLayers",
    "author": "VColLayers contributors",
    "version": (0, 1, 0),
    "blender": (3, 1, 0),
    "location": "3D Viewport > Sidebar > VCol",
    "description": "Create, paint, activate and remove vertex color layers",
    "category": "Mesh",
}


def register():
    # Imported here so vcollayers.util can be used without bpy
    import vcollayers.operators
    import vcollayers.reg.ui_reg
    from vcollayers.reg.base_reg import RegisterBase

    print("VColLayers: register")
    RegisterBase.register_all()


def unregister():
    from vcollayers.reg.base_reg import RegisterBase

    RegisterBase.unregister_all()
    print("VColLayers: unregister")
