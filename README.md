# meshkit

Small, dependency-free helpers that prepare mesh and texture data for a renderer.

- **OBJ meshes** (`meshkit.objmodel`): parse Wavefront `.obj` text into a
  deduplicated vertex list and a triangle index list. Each vertex holds a
  position, a texture coordinate and a normal. The vertex list can be flattened
  into an interleaved float list with 8 floats per vertex.
- **BMP images** (`meshkit.bmp`): read and write uncompressed 24-bit bitmaps as
  tightly packed RGB bytes, and invert colours.
- **DDS images** (`meshkit.dds`): read the width, height and compression code
  of a DDS file together with its raw surface data, and tell whether it is
  DXT1-compressed.
- **Textures** (`meshkit.texture`): load a BMP or DDS file in one call, picking
  the decoder by the file's signature.
- **Files** (`meshkit.fileio`): `load_file_content(path)` returns a file's
  bytes. It raises `ValueError` when the path is `None` and `OSError` when the
  file cannot be opened.

## Installation

```
pip install .
```

## Loading a mesh

```python
from meshkit.objmodel import load_obj, parse_obj

model = load_obj("Sphere.obj")
print(model.vertex_count(), model.index_count())

floats = model.interleaved()   # position(3), texcoord(2), normal(3) per vertex
```

`parse_obj(text)` does the same from a string. The model is an `ObjModel` with
the members `vertices`, a list of `VertexData`, and `indices`, a list of ints.

The parser reads these lines:

- `v x y z` adds a position.
- `vt u v` adds a texture coordinate.
- `vn x y z` adds a normal.
- `f a b c` adds a face.

Each face corner is written as `p/t/n`. Only the first three corners of a face
are used. A corner that repeats an earlier `(p, t, n)` triple is stored once and
is referred to again by its index. Other lines are ignored. A number that cannot
be read leaves that component, and the components after it, at `0.0`.

`ObjError` is raised in two cases:

- a face has fewer than three corners;
- a face refers to a position, texture coordinate or normal that does not exist.

Indices are 1-based.

## Bitmaps

```python
from meshkit.bmp import load_bmp, save_bmp, invert_colors

image = load_bmp("photo.bmp")               # BmpImage: width, height, pixels (RGB)
inverted = invert_colors(image.pixels)
save_bmp("inverted.bmp", inverted, image.width, image.height)
```

`parse_bmp(data)` and `encode_bmp(pixels, width, height)` work on bytes instead
of files. Pixels are read and written as one block of `width * height * 3`
bytes, starting at the header's pixel offset. The bytes are stored as BGR in the
file and as RGB in memory, and rows are taken to carry no padding.

`BmpError` (a `ValueError`) is raised in these cases:

- the signature is wrong;
- the headers or pixel data are truncated;
- the dimensions are negative;
- the pixel count passed to `encode_bmp` does not match the dimensions.

## DDS

```python
from meshkit.dds import decode_dds
from meshkit.fileio import load_file_content

image = decode_dds(load_file_content("brick.dds"))
print(image.width, image.height, image.four_cc, image.is_dxt1())
```

`DdsImage.data` holds the raw surface bytes that follow the 128-byte header. The
header gives how many bytes that is. The data is not decompressed. `DdsError` is
raised when the magic is missing, the header is short, or the data is truncated.

## Textures

```python
from meshkit.texture import load_texture_pixels, load_inverted_pixels

image = load_texture_pixels("brick.bmp")    # BmpImage for BMP, DdsImage for DDS
negative = load_inverted_pixels("brick.bmp")  # BmpImage with inverted colours
```

`load_texture_pixels` raises `TextureError` in two cases:

- the file is neither a BMP nor a DDS file;
- the file cannot be decoded.

`load_inverted_pixels` accepts BMP files only.

## What it does not do

meshkit only produces data in memory. It does not:

- open windows;
- compile shaders;
- upload buffers or textures to a GPU;
- render anything.

DXT-compressed surfaces are returned as they are, not decoded to pixels.

## Running the tests

```
pip install ".[test]"
pytest
```