# cub3d

A small first-person raycasting explorer. It reads a `.cub` scene file that
names the wall textures, gives the floor and ceiling colours and draws a grid
map, checks that the scene is well formed and that the map is closed, then
opens a pygame window where you walk around the maze.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cub3d path/to/map.cub
```

Exactly one argument is expected: the path to the scene file. The program
exits with status 1 when the arguments, the scene file or one of its
textures is not right, and with status 0 when the window is closed or
Escape is pressed.

## The .cub format

A scene file has three parts, in this order. Blank lines between the parts
are optional.

1. The texture paths, one per line, each given once:

   ```
   NO ./path_to_the_north_texture
   SO ./path_to_the_south_texture
   WE ./path_to_the_west_texture
   EA ./path_to_the_east_texture
   ```

2. The colours of the floor (`F`) and the ceiling (`C`), as three
   comma-separated values from 0 to 255, each given once:

   ```
   F 220,100,0
   C 255,255,255
   ```

3. The map, last in the file:

   ```
   111111
   1N0001
   10D001
   111111
   ```

Map characters:

- `1` wall
- `0` empty floor
- `D` door, closed at start
- `N`, `S`, `E`, `W` the player's start tile and facing direction (exactly one)
- space: outside the map

The map needs at least three lines and a line of at least three characters;
its first and last lines may hold only walls and spaces, and the area
reachable from the player must be closed by walls. Shorter lines are padded
with spaces. Only blank lines may follow the map.

Textures are XPM images. Colours may be given as `#RGB`, `#RRGGBB`,
`#RRRRGGGGBBBB`, `None`, or one of a few names (black, white, red, green,
blue, yellow, cyan, magenta, gray/grey). The door texture is read from
`textures/door.xpm`, relative to the current directory.

When the file breaks a rule, the error is printed to standard error (in red
on a terminal); for layout mistakes the expected format is printed too.

## Controls

| Key          | Action                       |
|--------------|------------------------------|
| W / S        | move forward / backward      |
| A / D        | strafe left / right          |
| Left / Right | turn                         |
| Mouse        | turn                         |
| E            | open or close the door ahead |
| Escape       | quit                         |

Walls and closed doors block movement; the player slides along them. A
minimap in the top-left corner shows the walls, the player and the direction
faced, and a crosshair is drawn at the centre of the view.

## What it does not do

The floor and ceiling colours in the scene file are checked and stored in
the `Scene`, but the view is drawn with fixed dark-brown floor and ceiling
colours. The program does not check that the scene file name ends in
`.cub`; `cub3d.extension.check_extension` is there for callers who want to.

## Using it as a library

The parsing, movement and rendering pieces work without a window:

```python
from cub3d.fileformat import load_scene
from cub3d.player import spawn_player
from cub3d.render import Frame, cast_column

scene = load_scene("maps/level.cub")
player = spawn_player(scene.grid)
hit = cast_column(player, scene.grid, 0.0)
print(hit.map_x, hit.map_y, hit.distance)
```

- `cub3d.fileformat`: `load_scene`, `parse_scene` and `check_mapfile_format`
  validate a scene; they raise `cub3d.model.ParseError` when it is not valid.
- `cub3d.model`: `Scene`, `GameMap` (tiles and door states) and `ParseState`.
- `cub3d.player`: `Player` with `facing` and `rotate`, and `spawn_player`.
- `cub3d.movement`: `InputState`, `step`, `is_wall`, `toggle_door_ahead` and
  `mouse_rotation`.
- `cub3d.images`: `parse_xpm`, `load_xpm`, `load_scene_textures` and `Texture`.
- `cub3d.render`: `Frame`, `render_frame` and the drawing helpers.