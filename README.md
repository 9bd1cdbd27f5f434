# rtscene

`rtscene` reads `.rt` scene description files for a simple ray tracer,
checks every element against the format's rules, and prints a readable
dump of the resulting scene.

## The scene format

Each non-empty line starts with an identifier followed by fields separated
by spaces. Vectors and colours are three comma-separated numbers; a number
is an optional sign, digits, and optionally a dot followed by digits.

| Identifier | Fields | Rules |
|------------|--------|-------|
| `A` | ratio, colour | at most one; ratio in [0.0, 1.0] |
| `C` | position, direction, fov | at most one; direction components in [-1, 1] and not all zero; fov in [0, 180] |
| `L` | position, ratio, colour | any number; ratio in [0.0, 1.0] |
| `sp` | centre, diameter, colour | diameter > 0 |
| `pl` | point, normal, colour | normal components in [-1, 1] and not all zero |

Colours are whole numbers from 0 to 255. Blank lines are ignored; any
other identifier is an error.

```
A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255
sp 0,0,20 20 255,0,0
pl 0,0,0 0,1,0 0,0,255
```

## Command line

```
rtscene scene.rt
```

This prints the parsed scene: the ambient light, the camera, then the
lights and objects numbered in file order. If there is not exactly one
argument, the argument does not end in `.rt`, the file cannot be opened,
or a line breaks a rule, a line of the form `Error: ...` is printed to
standard output and the command exits with status 1.

## Library use

```python
from rtscene.parser import parse_file, parse_lines
from rtscene.report import format_scene
from rtscene.scene import SceneError

scene = parse_file("scene.rt")
print(format_scene(scene))

try:
    parse_lines(["A 1.5 255,255,255"])
except SceneError as exc:
    print(exc)  # Ambient ratio must be in [0.0,1.0]!
```

- `rtscene.scene` — the data model. A `Scene` holds `ambient` (`Ambient`),
  `camera` (`Camera`), `lights` (a list of `Light`) and `objects` (a list
  of `Sphere` and `Plane`, each with a `type` from `ObjectType`). Every
  vector and colour is a frozen `Vec` with `x`, `y` and `z`.
  `SceneError` carries the message and an `exit_code`.
- `rtscene.parser` — `parse_line`, `parse_lines` and `parse_file`, plus
  one function per identifier (`parse_ambient`, `parse_camera`,
  `parse_light`, `parse_sphere`, `parse_plane`) that takes a scene and
  the line's tokens.
- `rtscene.values` — single fields: `parse_double`, `parse_vector`,
  `parse_color` (these raise `ValueError` on a bad field),
  `is_invalid_double`, `is_invalid_vector` and `has_invalid_input`.
- `rtscene.report` — `format_scene` and its parts (`format_vec`,
  `format_ambient`, `format_camera`, `format_lights_and_objects`), all
  returning text.
- `rtscene.cli` — `main(argv=None)`, behind the `rtscene` command, and
  `check_scene_path`.

## Supporting modules

- `rtscene.linereader` — `LineReader` and `read_lines` return the lines of
  a text or binary stream, newline kept, reading a fixed number of units
  at a time.
- `rtscene.strtools` — C-style string helpers (`split`, `strtrim`,
  `substr`, `strcmp`, `strlcpy`, `strlcat` and others) that return indexes
  or new strings.
- `rtscene.chars` — character tests, case mapping, `atoi`, `atol` and
  `itoa` with 32- and 64-bit wrapping.
- `rtscene.memory` — fill, copy, move, search and compare on byte buffers.
- `rtscene.printf` — `format_printf` and `print_formatted` for the
  conversions `%c %s %p %d %i %u %x %X %%`, and small stream writers.

## What it does not do

`rtscene` only reads, checks and prints scenes. It does not trace rays,
render images, open a window, or load image files. Cylinders have an
`ObjectType` member but cannot be read from a scene file: a `cy` line is
rejected like any other unknown identifier.