from __future__ import annotations


# VERTEX was renamed to ATTRIBUTE in Blender 3.2
COLOR_TYPES = ('MATERIAL', 'OBJECT', 'RANDOM', 'SINGLE', 'TEXTURE', 'VERTEX', 'ATTRIBUTE')
_COLOR_TYPE_ALIASES = {
    'VERTEX': 'ATTRIBUTE',
    'ATTRIBUTE': 'VERTEX',
}


def _view3d_areas(screen):
    if screen is None:
        return []
    return [area for area in screen.areas if area.type == 'VIEW_3D']


def _view3d_spaces(screen):
    spaces = []
    for area in _view3d_areas(screen):
        for space in area.spaces:
            if space.type == 'VIEW_3D':
                spaces.append(space)
    return spaces


def _assign_color_type(shading, color_type: str) -> None:
    try:
        shading.color_type = color_type
    except TypeError:
        alias = _COLOR_TYPE_ALIASES.get(color_type)
        if alias is None:
            raise
        shading.color_type = alias


def set_viewport_color_type(screen, color_type: str, shading_type: str = 'SOLID') -> int:
    """Show ``color_type`` in every 3D viewport of ``screen``.

    Returns the number of viewports changed. A missing screen (background
    mode) changes nothing.
    """
    if color_type not in COLOR_TYPES:
        raise ValueError(f"Unknown viewport color type: {color_type}")

    changed = 0
    for space in _view3d_spaces(screen):
        shading = space.shading
        shading.type = shading_type
        _assign_color_type(shading, color_type)
        changed += 1
    tag_redraw(screen)
    return changed


def tag_redraw(screen) -> int:
    areas = _view3d_areas(screen)
    for area in areas:
        area.tag_redraw()
    return len(areas)


def refresh_object_display(obj) -> None:
    """Force the viewport to drop stale color data for ``obj``.

    Removing the displayed color layer can leave the old colors on screen
    until the object is redrawn; hiding and showing it again works around it.
    """
    if obj is None:
        return
    hidden = obj.hide_viewport
    obj.hide_viewport = not hidden
    obj.hide_viewport = hidden
    data = getattr(obj, "data", None)
    if data is not None:
        data.update()
