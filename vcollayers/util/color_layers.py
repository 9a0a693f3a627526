"""
Helpers for named color layers on a mesh.

Blender 3.2+ stores vertex colors in ``Mesh.color_attributes``; older files
and versions only expose the deprecated ``Mesh.vertex_colors`` collection.
Every function here accepts either, so the same calls work from the Python
console of any version.
"""

from __future__ import annotations

import numpy as np


DOMAINS = ('POINT', 'CORNER')
DATA_TYPES = ('BYTE_COLOR', 'FLOAT_COLOR')


class ColorLayerError(RuntimeError):
    """A color layer is missing or the mesh has no color layer API."""


def layer_collection(mesh):
    if mesh is None:
        raise ColorLayerError("No mesh given")
    layers = getattr(mesh, "color_attributes", None)
    if layers is not None:
        return layers
    # Deprecated API, kept for files opened in old versions
    layers = getattr(mesh, "vertex_colors", None)
    if layers is not None:
        return layers
    raise ColorLayerError(f"Mesh '{getattr(mesh, 'name', '?')}' has no color layer API")


def _is_legacy(layers) -> bool:
    return not hasattr(layers, "active_color")


def _get_layer(mesh, name: str):
    layer = layer_collection(mesh).get(name)
    if layer is None:
        raise ColorLayerError(f"Color layer '{name}' not found on '{getattr(mesh, 'name', '?')}'")
    return layer


def _normalize_color(color) -> np.ndarray:
    rgba = np.asarray(color, dtype=np.float32).reshape(-1)
    if rgba.shape[0] == 3:
        rgba = np.append(rgba, np.float32(1.0))
    if rgba.shape[0] != 4:
        raise ValueError(f"Expected an RGB or RGBA color, got {len(rgba)} components")
    return np.clip(rgba, 0.0, 1.0)


def layer_names(mesh) -> list[str]:
    return [layer.name for layer in layer_collection(mesh)]


def has_color_layer(mesh, name: str) -> bool:
    return layer_collection(mesh).get(name) is not None


def ensure_color_layer(mesh, name: str, domain: str = 'CORNER', data_type: str = 'BYTE_COLOR'):
    """Return the layer called ``name``, creating it only if it is not present yet.

    ``domain`` and ``data_type`` are ignored for the legacy API, whose layers
    are always per-loop byte colors.
    """
    if domain not in DOMAINS:
        raise ValueError(f"Unsupported color domain: {domain}")
    if data_type not in DATA_TYPES:
        raise ValueError(f"Unsupported color type: {data_type}")

    layers = layer_collection(mesh)
    layer = layers.get(name)
    if layer is not None:
        return layer

    # Attribute names are unique across every kind of attribute
    attributes = getattr(mesh, "attributes", None)
    if attributes is not None and attributes.get(name) is not None:
        raise ColorLayerError(
            f"Name '{name}' is already used by a non-color attribute on '{getattr(mesh, 'name', '?')}'"
        )

    if _is_legacy(layers):
        layer = layers.new(name=name)
    else:
        layer = layers.new(name=name, type=data_type, domain=domain)
    if layer is None:
        # vertex_colors.new returns None once the layer limit is reached
        raise ColorLayerError(f"Could not create color layer '{name}'")
    if layer.name != name:
        created = layer.name
        layers.remove(layer)
        raise ColorLayerError(f"Color layer '{name}' was created as '{created}'")
    return layer


def _selection_mask(mesh, domain: str) -> np.ndarray:
    vert_select = np.zeros(len(mesh.vertices), dtype=bool)
    mesh.vertices.foreach_get("select", vert_select)
    if domain == 'POINT':
        return vert_select
    loop_verts = np.empty(len(mesh.loops), dtype=np.int32)
    mesh.loops.foreach_get("vertex_index", loop_verts)
    return vert_select[loop_verts]


def read_color_layer(mesh, name: str) -> np.ndarray:
    layer = _get_layer(mesh, name)
    flat = np.empty(len(layer.data) * 4, dtype=np.float32)
    if flat.size:
        layer.data.foreach_get("color", flat)
    return flat.reshape(-1, 4)


def paint_color_layer(mesh, name: str, color, only_selected: bool = True) -> int:
    """Write ``color`` into the layer and return how many elements were painted.

    Per-loop layers get the color on every loop that uses a selected vertex,
    per-vertex layers on every selected vertex. Unpainted elements keep their
    current value. The selection flags are read from the mesh data, so an
    object in Edit Mode has to be synced first.
    """
    layer = _get_layer(mesh, name)
    rgba = _normalize_color(color)
    count = len(layer.data)
    if count == 0:
        return 0

    domain = getattr(layer, "domain", 'CORNER')
    if only_selected:
        mask = _selection_mask(mesh, domain)
    else:
        mask = np.ones(count, dtype=bool)
    if mask.shape[0] != count:
        raise ColorLayerError(
            f"Layer '{name}' has {count} elements but the {domain} selection has {mask.shape[0]}"
        )
    painted = int(mask.sum())
    if painted == 0:
        return 0

    colors = read_color_layer(mesh, name)
    colors[mask] = rgba
    layer.data.foreach_set("color", colors.reshape(-1))
    mesh.update()
    return painted


def active_color_layer_name(mesh) -> str | None:
    layers = layer_collection(mesh)
    active = layers.active if _is_legacy(layers) else layers.active_color
    return active.name if active is not None else None


def render_color_layer_name(mesh) -> str | None:
    layers = layer_collection(mesh)
    if _is_legacy(layers):
        for layer in layers:
            if layer.active_render:
                return layer.name
        return None
    names = [layer.name for layer in layers]
    idx = layers.render_color_index
    if 0 <= idx < len(names):
        return names[idx]
    return None


def set_active_color_layer(mesh, name: str, render: bool = False):
    """Make ``name`` the active color layer, and the render layer too if asked."""
    layers = layer_collection(mesh)
    layer = _get_layer(mesh, name)
    if _is_legacy(layers):
        layers.active = layer
        if render:
            layer.active_render = True
    else:
        layers.active_color = layer
        if render:
            layers.render_color_index = layer_names(mesh).index(name)
    return layer


def remove_color_layers(mesh, names=None) -> list[str]:
    """Remove the named layers (all of them when ``names`` is None).

    Missing names are skipped. Returns the removed names in collection order.
    """
    layers = layer_collection(mesh)
    existing = layer_names(mesh)
    if names is None:
        targets = existing
    else:
        if isinstance(names, str):
            names = [names]
        wanted = set(names)
        targets = [n for n in existing if n in wanted]

    active = active_color_layer_name(mesh)
    for name in targets:
        layers.remove(layers.get(name))

    remaining = layer_names(mesh)
    if remaining and active in targets:
        set_active_color_layer(mesh, remaining[0])
    return targets
