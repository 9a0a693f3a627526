"""Small duck-typed stand-ins for the Blender data the helpers touch.

They only model what vcollayers.util reads and writes: vertex selection,
loop -> vertex indices, color layer collections (current and legacy API),
and screens with 3D viewport areas.
"""

from __future__ import annotations

import numpy as np


class _Item:
    def __init__(self, **attrs):
        self.__dict__.update(attrs)


class PropCollection:
    """List with Blender's foreach_get/foreach_set flat-buffer protocol."""

    def __init__(self, items):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, idx):
        return self._items[idx]

    def foreach_get(self, attr, seq):
        values = np.array([getattr(item, attr) for item in self._items], dtype=np.float64).reshape(-1)
        if len(values) != len(seq):
            raise RuntimeError(f"foreach_get size mismatch: {len(seq)} != {len(values)}")
        seq[:] = values.astype(np.asarray(seq).dtype)

    def foreach_set(self, attr, seq):
        arr = np.asarray(seq, dtype=np.float64).reshape(-1)
        if not self._items:
            return
        width = arr.size // len(self._items)
        if width * len(self._items) != arr.size:
            raise RuntimeError("foreach_set size mismatch")
        for i, item in enumerate(self._items):
            chunk = arr[i * width:(i + 1) * width]
            setattr(item, attr, tuple(float(v) for v in chunk) if width > 1 else float(chunk[0]))


class ColorLayer:
    def __init__(self, name, size, domain='CORNER', data_type='BYTE_COLOR'):
        self.name = name
        self.domain = domain
        self.data_type = data_type
        self.data = PropCollection(_Item(color=(1.0, 1.0, 1.0, 1.0)) for _ in range(size))


class LegacyColorLayer:
    """Deprecated MeshLoopColorLayer: always per loop, no domain attribute."""

    def __init__(self, name, size):
        self.name = name
        self.active_render = False
        self.data = PropCollection(_Item(color=(1.0, 1.0, 1.0, 1.0)) for _ in range(size))


class _LayerList:
    def __init__(self, mesh):
        self._mesh = mesh
        self._layers = []

    def __len__(self):
        return len(self._layers)

    def __iter__(self):
        return iter(list(self._layers))

    def __getitem__(self, idx):
        return self._layers[idx]

    def get(self, name, default=None):
        for layer in self._layers:
            if layer.name == name:
                return layer
        return default

    def keys(self):
        return [layer.name for layer in self._layers]

    def _unique_name(self, name):
        # Blender renames instead of failing when any attribute owns the name
        taken = set(self.keys()) | set(self._mesh.generic_attribute_names)
        if name not in taken:
            return name
        idx = 1
        while f"{name}.{idx:03d}" in taken:
            idx += 1
        return f"{name}.{idx:03d}"


class ColorAttributes(_LayerList):
    """Mesh.color_attributes (Blender 3.2+)."""

    def __init__(self, mesh):
        super().__init__(mesh)
        self.active_color = None
        self.render_color_index = 0

    def new(self, name, type, domain):
        size = len(self._mesh.vertices) if domain == 'POINT' else len(self._mesh.loops)
        layer = ColorLayer(self._unique_name(name), size, domain, type)
        self._layers.append(layer)
        if self.active_color is None:
            self.active_color = layer
        return layer

    def remove(self, layer):
        if layer not in self._layers:
            raise RuntimeError("attribute not found")
        self._layers.remove(layer)
        if self.active_color is layer:
            self.active_color = None


class VertexColors(_LayerList):
    """Deprecated Mesh.vertex_colors."""

    MAX_LAYERS = 8

    def __init__(self, mesh):
        super().__init__(mesh)
        self.active = None

    def new(self, name):
        if len(self._layers) >= self.MAX_LAYERS:
            return None
        layer = LegacyColorLayer(self._unique_name(name), len(self._mesh.loops))
        self._layers.append(layer)
        if self.active is None:
            self.active = layer
            layer.active_render = True
        return layer

    def remove(self, layer):
        self._layers.remove(layer)
        if self.active is layer:
            self.active = None


class Attributes:
    """Mesh.attributes: every attribute, color or not, by name."""

    def __init__(self, mesh):
        self._mesh = mesh

    def get(self, name, default=None):
        if name in self._mesh.generic_attribute_names:
            return _Item(name=name, data_type='FLOAT')
        layers = getattr(self._mesh, "color_attributes", None)
        if layers is None:
            layers = self._mesh.vertex_colors
        return layers.get(name, default)


class Mesh:
    """Two quads sharing an edge:

        3---4---5
        |   |   |
        0---1---2
    """

    FACES = ((0, 1, 4, 3), (1, 2, 5, 4))

    def __init__(self, name="Mesh", selected=(), legacy=False, generic_attributes=(), expose_attributes=True):
        self.name = name
        self.vertices = PropCollection(_Item(select=(i in selected)) for i in range(6))
        self.loops = PropCollection(_Item(vertex_index=v) for face in self.FACES for v in face)
        # non-color attributes (FLOAT, INT, ...) sharing the attribute name space
        self.generic_attribute_names = list(generic_attributes)
        if legacy:
            self.vertex_colors = VertexColors(self)
        else:
            self.color_attributes = ColorAttributes(self)
        if expose_attributes:
            self.attributes = Attributes(self)
        self.update_count = 0

    def update(self):
        self.update_count += 1


class Object:
    def __init__(self, data=None, hide_viewport=False):
        self.data = data
        self._hide_viewport = hide_viewport
        self.hide_history = []

    @property
    def hide_viewport(self):
        return self._hide_viewport

    @hide_viewport.setter
    def hide_viewport(self, value):
        self.hide_history.append(value)
        self._hide_viewport = value


class Shading:
    def __init__(self, accepted=('MATERIAL', 'OBJECT', 'RANDOM', 'SINGLE', 'TEXTURE', 'ATTRIBUTE')):
        self._accepted = set(accepted)
        self.type = 'SOLID'
        self._color_type = 'MATERIAL'

    @property
    def color_type(self):
        return self._color_type

    @color_type.setter
    def color_type(self, value):
        # bpy raises TypeError for enum values it does not know
        if value not in self._accepted:
            raise TypeError(f"enum \"{value}\" not found")
        self._color_type = value


class Space:
    def __init__(self, type='VIEW_3D', shading=None):
        self.type = type
        self.shading = shading or Shading()


class Area:
    def __init__(self, type='VIEW_3D', spaces=None):
        self.type = type
        self.spaces = spaces if spaces is not None else [Space(type)]
        self.redraws = 0

    def tag_redraw(self):
        self.redraws += 1


class Screen:
    def __init__(self, areas):
        self.areas = list(areas)
