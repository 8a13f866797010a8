"""Wavefront OBJ loading into indexed vertex data."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from meshkit.fileio import PathLike, load_file_content

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ObjError(ValueError):
    """Raised when OBJ data references data it does not contain."""


@dataclass(frozen=True)
class VertexData:
    """One unique vertex: position, texture coordinate and normal."""

    position: tuple[float, float, float]
    texcoord: tuple[float, float]
    normal: tuple[float, float, float]


@dataclass
class ObjModel:
    """An indexed triangle mesh."""

    vertices: list[VertexData] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def index_count(self) -> int:
        return len(self.indices)

    def interleaved(self) -> list[float]:
        """Return vertex data flattened as position, texcoord, normal per vertex."""
        return [
            value
            for vertex in self.vertices
            for value in (*vertex.position, *vertex.texcoord, *vertex.normal)
        ]


def _read_floats(tokens: list[str], count: int) -> tuple[float, ...]:
    """Read up to ``count`` leading numbers; the rest stay zero, as after a failed read."""
    values = [0.0] * count
    for slot, token in zip(range(count), tokens):
        match = _FLOAT_PREFIX.match(token)
        if match is None:
            values[slot] = 0.0
            break
        values[slot] = float(match.group())
    return tuple(values)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _split_face_vertex(text: str) -> tuple[int, int, int]:
    """Split a face vertex like ``p/t/n`` into its three indices."""
    pos = text.find("/")
    pos2 = text.find("/", pos + 1)
    position = text if pos == -1 else text[:pos]
    texcoord = text[pos + 1:] if pos2 == -1 else text[pos + 1:pos2]
    normal = text if pos2 == -1 else text[pos2 + 1:]
    return _atoi(position), _atoi(texcoord), _atoi(normal)


def _lookup(items: list, index: int, kind: str):
    if not 1 <= index <= len(items):
        raise ObjError(f"{kind} index {index} out of range (have {len(items)})")
    return items[index - 1]


def parse_obj(text: str) -> ObjModel:
    """Parse OBJ text, merging face vertices that share all three indices."""
    positions: list[tuple[float, ...]] = []
    texcoords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    defines: dict[tuple[int, int, int], int] = {}
    indices: list[int] = []

    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        tokens = line.split()
        if line[0] == "v":
            kind = line[1:2]
            if kind == "t":
                texcoords.append(_read_floats(tokens[1:], 2))
            elif kind == "n":
                normals.append(_read_floats(tokens[1:], 3))
            else:
                positions.append(_read_floats(tokens[1:], 3))
        elif line[0] == "f":
            corners = tokens[1:4]
            if len(corners) < 3:
                raise ObjError(f"line {line_number}: face needs three vertices")
            for corner in corners:
                key = _split_face_vertex(corner)
                indices.append(defines.setdefault(key, len(defines)))

    vertices = [
        VertexData(
            position=_lookup(positions, p, "position"),
            texcoord=_lookup(texcoords, t, "texcoord"),
            normal=_lookup(normals, n, "normal"),
        )
        for p, t, n in defines
    ]
    return ObjModel(vertices, indices)


def load_obj(path: PathLike) -> ObjModel:
    """Read and parse the OBJ file at ``path``."""
    return parse_obj(load_file_content(path).decode("utf-8", errors="replace"))