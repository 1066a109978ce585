# enginecore

Engine-independent core pieces of a small real-time engine, in plain Python
with no dependencies outside the standard library.

## Modules

- `enginecore.singleton`: `Singleton`, a base class whose `get()` builds one
  shared instance per subclass on first use, and whose `destroy()` drops it so
  that the next `get()` builds a fresh one.
- `enginecore.names`: interned names. `Name(text)` stores the text in the
  shared `NamePool` (see `get_name_pool()`). Names are keyed by the 32-bit
  djb2 hash (`hash_string`) and compared by the hash of the lower-cased text
  (`hash_string_lower`). Equality therefore ignores letter case, while
  `str()` gives back the text as first written. `Name()` and names of 256
  characters or more are the none name. Its `is_none()` is true and its
  `str()` is `"None"`. `NamePool.resolve` raises `KeyError` for an unknown
  index.
- `enginecore.delegates`: `Delegate` and `MulticastDelegate`.
  - `Delegate` holds one callable. `bind(func, *args)` puts `args` before
    the call's own arguments. `execute` raises `UnboundDelegateError` when
    nothing is bound. `execute_if_bound` reports whether the callable ran.
  - `MulticastDelegate.add` returns a `DelegateHandle`. `remove` returns
    `False` for an invalid handle.
  - `broadcast` calls every callable registered when it began.
- `enginecore.uobject`: runtime class information.
  - `EngineObject.static_class()` returns the `ClassInfo` of a class, which
    is linked to the class's engine-object superclass.
  - `ClassInfo.is_child_of` and `EngineObject.is_a` walk that chain.
  - `ClassInfo.default_object()` builds the class default object on first
    use.
  - `cast(target, obj)` returns `obj` or `None`. `cast_checked` raises
    `CastError` instead.
  - `EndPlayReason` lists why an object left play.
- `enginecore.show_flags`: `EngineShowFlags`, a 64-bit set of `ShowFlag`
  bits. All bits start on. The names `"Primitives"` and `"BillboardText"`
  work with `set_flag_by_name`, which returns `False` for an unknown name.
  They also work with `find_index_by_name`, which returns the bit value or
  `-1`.
- `enginecore.view_mode`: `ViewMode` and `ViewModeIndex`.
  - The mode starts as `SOLID`.
  - `initialize()` builds the solid and wireframe `RasterizerState`s and
    switches to `DEFAULT`.
  - `rasterizer_state()` returns the state for the current mode, or `None`
    in `DEFAULT`.
- `enginecore.font_atlas`: `FontAtlas` and `GlyphInfo`.
  - `FontAtlas.parse(lines)` reads a glyph description. Blank lines and
    lines starting with `#` are skipped. `TEXTURE_WIDTH`, `TEXTURE_HEIGHT`,
    `CELL_WIDTH`, `CELL_HEIGHT`, `CELLS_PER_ROW` and `CELLS_PER_COLUMN`
    lines set the grid. Every other line gives `<cell index> <character
    code>`.
  - `FontAtlas.load(path)` reads such a file. The default path is
    `Pretendard_Kor.txt`.
  - `get_glyph` returns the glyph's UV rectangle, or an all-zero glyph for
    an unknown character.
- `enginecore.console`: `Console` keeps log lines and a command history.
  - `log(fmt, *args)` formats printf-style and keeps at most 1023
    characters.
  - `submit(text)` echoes, records and runs a command through
    `process_command`. The commands are `clear` and `help`; anything else
    is reported as unknown.
  - `history_previous()` and `history_next()` step through past commands.
  - `resize_to_screen`, `resize_by_ratio` and `screen_ratio` rescale window
    positions, sizes and points when the screen size changes.
- `enginecore.scene_io`: `save_scene(world_info)` writes
  `<scene_name>.scene` as JSON and returns its path. It returns `None` for
  an unnamed scene. `load_scene(scene_name)` reads the file back into a
  `WorldInfo` holding `ObjectInfo`s, ordered by UUID key compared as text.
  It raises `FileNotFoundError` when the file is missing.
- `enginecore.debug_draw`: `DebugDrawManager` batches debug lines into
  `LineVertex` and index lists.
  - `draw_line` adds one line.
  - `draw_aabb_box` adds the twelve edges of an axis-aligned box.
  - `draw_obb_box` adds a box transformed by a 4x4 row-vector matrix,
    without its translation.
  - `draw_bounding_box` applies the full transform and first draws the
    world-space bounds in blue.
  - `take_batch()` hands over the batch and starts a new one.

## Install

```
pip install .
```

## Examples

```python
from enginecore.names import Name

assert Name("Actor") == Name("ACTOR")
print(str(Name("Actor")))  # Actor
```

```python
from enginecore.delegates import MulticastDelegate

on_tick = MulticastDelegate()
handle = on_tick.add(lambda: print("tick"))
on_tick.broadcast()
on_tick.remove(handle)
```

```python
from enginecore.console import Console

console = Console()
console.submit("help")
print(console.items)
# ['> help', 'Executing: help', 'Available commands:',
#  '- clear: Clears the console.', '- help: Shows this help message.']
```

```python
from enginecore.debug_draw import DebugDrawManager

manager = DebugDrawManager()
manager.draw_aabb_box((0, 0, 0), (1, 1, 1), (1, 0, 0, 1), 1.0)
vertices, indices = manager.take_batch()
print(len(vertices), len(indices))  # 24 24
```

## What it does not do

Nothing here draws to a screen or talks to a graphics device.
`DebugDrawManager` only collects vertices and indices. `ViewMode` only
describes rasterizer states. `FontAtlas` only computes texture coordinates.
`Console` keeps text and runs commands, but has no window.

Line lifetimes are accepted but not tracked. Scene files record actors'
placement and type, but no world or actors are built from them.

## Tests

```
pip install .[test]
pytest
```