"""Engine pieces of a console action role-playing game: data readers, palettes,
VIF meshes, text colour, textures, GS memory allocation, pads and menus."""

__version__ = "0.1.0"