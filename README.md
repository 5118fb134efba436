# xshooting

The core of a vertical-scrolling arcade shooter: its configuration, its
resource loading, its scene flow and a title screen that can be played on the
console.

## Contents

- `xshooting.config`: screen, map, player and enemy constants; `SceneID`;
  `TextureConfig` (sprite-sheet slice layout, with `slice_count()`) and the
  layouts in `TextureConfigs`; `EnemyStatus` and `enemy_status(number)`, which
  raises `KeyError` for an unknown number; `wrap_clamp(value, low, high)`;
  `GameStatus` (score and lives).
- `xshooting.ids`: `TextureType`, with `is_air_enemy()` and
  `is_ground_enemy()`, and `EnemyName`, whose `base()` gives the enemy a
  variant belongs to and `variant()` its variant number (1 for the base enemy).
- `xshooting.stages`: the map CSV file names of each stage.
  `stage_files(stage)` takes stages 1 to 3 (otherwise `ValueError`) and returns
  a `StageCsvFiles` whose `partitions()` pairs front and back files.
- `xshooting.csvdata`: `read_csv_ints(path)` reads every comma-separated
  integer of a file; `CsvMapFiles.load(draw_file, back_file)` records both
  files if they can be opened. Problems raise `CsvDataError`.
- `xshooting.texture`: `slice_image(path, config)` cuts a sheet with Pillow;
  `GameTexture` holds the selected frames (`frame(index)`,
  `frames_in_range(start, count)`); `TextureStore` keeps paths, layouts and
  textures by `TextureType`. Problems raise `TextureError`.
- `xshooting.resources`: `ResourceManager(root)` loads sheets and map files
  relative to `root`; `texture_source(texture_type)` tells which texture type's
  sheet holds a type's frames. Problems raise `ResourceError`.
- `xshooting.scene`: the abstract `Scene` (frame counter, `Cursor`,
  `move_cursor`) and `GameManager` (`init`, `input`, `game_loop`, `end`).
- `xshooting.title`: `TitleScene`, driven by a callable that says whether a
  `TitleKey` was pushed this frame. Choosing one player sets
  `GameStatus.life` to 3, two players to 6, and `update()` then returns
  `SceneID.GAME`.
- `xshooting.scene_manager`: `SceneManager`, built from a mapping of
  `SceneID` to scene factories; it switches scenes when `update()` of the
  current scene returns a registered id, and returns `SceneID.APP_EXIT` when
  the scene fails.
- `xshooting.app`: `run(manager, max_frames)` and the `main` entry point.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Usage

Load the resources from a directory that holds the `res/` tree of images and
map CSV files:

```python
from xshooting.resources import ResourceManager
from xshooting.ids import TextureType

resources = ResourceManager("path/to/game")
resources.load_all()
title = resources.get_texture(TextureType.TITLE)
frame = title.frame(0)                 # a Pillow image
cells = resources.draw_map_data()      # map chip numbers, last cell first
```

`load_all()` expects every sheet under `res/` and the first stage's map files
`res/Map/Stage1_Front.csv` and `res/Map/Stage1_Back.csv`; a missing file
raises `ResourceError`.

Look up the files of a stage:

```python
from xshooting.stages import stage_files

for front, back in stage_files(1).partitions():
    print(front, back)
```

Drive a game loop with a `GameManager` of your own through
`xshooting.app.run(manager, max_frames=None)`. It calls `init()`, then
`input()` and `game_loop()` each frame until their sum reaches
`SceneID.APP_EXIT` or `max_frames` frames have run, always calls `end()`, and
returns the number of frames run.

## Command line

```
xshooting [--root DIR] [--frames N]
```

plays the title screen on the console. Each line read from standard input is
one frame; the words `esc`, `select`, `up`, `down` and `cancel` on it are the
keys pushed in that frame. After each frame the drawn items are printed,
followed by a line `--`. The title logo is loaded from `DIR/res/Title.png`
(default `DIR` is `.`); if it cannot be loaded a warning goes to standard
error and the screen is drawn without it. The program stops at the end of
input, on `esc`, after `N` frames, or on the frame after the players have been
chosen.

## What this package does not do

There is no game scene: no player ship, bullets, enemies, collisions or map
scrolling, and no result or option screen. Only the title screen is
registered with the console program, and nothing is shown in a window; output
is text only. There is no sound.