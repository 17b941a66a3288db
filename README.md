# darkalliance

Engine pieces of a console action role-playing game, written as plain Python.
Nothing here needs the console: the controller driver is an interface you
supply, and all state lives in ordinary objects.

## What is inside

- `darkalliance.data_util`: little-endian readers. `ByteReader` reads
  sequentially (`read_int`, `read_short`, `read_ushort`, `read_float`);
  `le_int`, `le_short`, `le_ushort` and `le_float` read at an offset. Reads
  past the end of the data raise `ValueError`.
- `darkalliance.palette`: `Palette`, a list of 32-bit RGBA entries.
  `Palette.from_bytes(data, palw, palh)` reads one, `lookup` finds an entry's
  index (or returns the entry count when absent), `value` returns an entry as
  a signed integer and `unswizzle` reorders a 256-entry palette from the GS
  CSM1 layout.
- `darkalliance.vif_mesh`: `VifData.from_bytes` parses a VIF mesh header;
  `mesh_mask` works out which sub-meshes are visible for a set of active change
  items, and `num_tris_of_selected_vifs` counts the triangles of the selected
  sub-meshes. `VifFlags` names the header flags.
- `darkalliance.text`: `scale_color` scales the colour channels of an ABGR
  word while keeping alpha, and `to_wide` widens single-byte text to 16-bit
  code units.
- `darkalliance.texture`: `TextureHeader`, `Texture` and `encode`, which
  rewrites the GIF upload packet of a 256-colour texture in place as 8-bit
  palette indices and updates the header's `qwc`.
- `darkalliance.gs_allocator`: `GSAllocator`, the frame-based allocator for
  texture blocks in GS memory, with `GSAllocInfo` blocks. It offers
  `allocate`, `commit`, `uncommit`, `reset_frame`, `reset` and `blocks`.
- `darkalliance.pad`: `PadReader` polls two ports of a `PadBackend` and turns
  the raw `PadStatus` into `ControllerInput` (buttons, newly pressed buttons
  with auto-repeat, pressure values, analogue sticks and rumble).
  `scale_analog_stick` applies the radial dead zone; `Button` names the button
  bits.
- `darkalliance.menu`: `Menu` of `MenuItem` rows with a `MenuKind` each.
  `Menu.layout` places the rows and `Menu.update` applies one frame of input,
  skipping disabled rows and changing int, float, toggle and slider values.
- `darkalliance.language_menu`: the language chooser: `make_language_menu`,
  `language_for_index`, `choose_language` and the `Language` ids.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Examples

GS memory allocation:

    from darkalliance.gs_allocator import GSAllocator
    from darkalliance.texture import TextureHeader

    alloc = GSAllocator(frame_count=1)
    tex = TextureHeader(required_gs_mem=100)
    block = alloc.allocate(tex)
    print(hex(block.dbp), block.size)      # 0x3310 100

    alloc.commit(3, tex)
    alloc.frame_count += 1
    alloc.reset_frame()                    # commits dropped, block kept

Menus:

    from darkalliance.menu import Menu, MenuItem, MenuKind
    from darkalliance.pad import Button

    menu = Menu([MenuItem("Start"), MenuItem("Load", MenuKind.DISABLED), MenuItem("Quit")])
    menu.update(Button.PAD_DOWN)           # returns 2: the disabled row is skipped

Controller input, with an in-memory backend:

    from darkalliance.pad import PadBackend, PadReader, PadStatus, Button

    reader = PadReader(PadBackend({0: PadStatus(mode=0x73, btns=0xBFFF)}))
    inputs = reader.read_input()
    print(bool(inputs[0].updated_buttons & Button.CROSS))   # True

Picking a language:

    from darkalliance.language_menu import make_language_menu, choose_language
    from darkalliance.pad import Button

    menu = make_language_menu()
    print(choose_language(menu, Button.CROSS))   # Language.ENGLISH

## What it does not do

There is no game loop, renderer or display code: nothing draws menus or text
to a screen, and `Menu.layout` only computes positions. There is no loading of
game archive files and no cache of loaded files; textures and mesh headers are
parsed from bytes you pass in. There is no debug-trace output and no command
to run.