# arthur

A small side-scrolling platformer. You play a swordsman who runs and jumps
across a tiled level. Along the way there are patrolling skeletons, fire
spirits and traps. A werewolf boss waits at the end, and barrels of fish
restore lost health.

## Installing

```
pip install .
```

This also installs pygame.

## Images

The package does not ship any images. The game reads them from a texture
directory, which must hold:

- the background: `Summer8.png`
- the tiles: `ground.png`, `blackblock.png`, `island-L.png`, `island-R.png`,
  `lower-L.png`, `lower-R.png`, `trapS.png`, `pila.png`, `Fishbarrel2.png`
- the sprite sheets: `Swordsman_spritelist.png`, `Skeleton_spritelist.png`,
  `Fire_Spirit_spritelist.png`, `Werewolf_Spritelist.png`

`Arial.ttf` in the same directory is used for the end-of-game message if it
is there; otherwise pygame's default font is used. If any required image is
missing, the command prints the missing paths and exits with status 1.

## Playing

```
arthur
```

By default the images are read from a directory named `Textures` in the
current directory. Use `--textures` to point elsewhere:

```
arthur --textures path/to/textures
```

Controls:

- `A` / `D`: run left and right
- `Space`: jump
- left mouse button: sword attack
- right mouse button: block

The swordsman has three hit points. Spikes and saws kill him on contact.
He loses a hit point when a skeleton or the boss lands an attack that he
does not block. A fire spirit burns him if he stands in contact with it; to
defeat one, land on it from above. Barrels of fish give back a hit point.
Reduce the boss to zero health to win. When the game is won or lost, the
message "You win!" or "You LOST!" is shown for a few seconds and the window
closes.

## Using the pieces

The game logic does not depend on a window, so it can be driven directly.
It lives in these modules:

- `arthur.level`: the tile map (`Level`, `default_level`), the `Rect` and
  `distance` helpers, and `load_textures` for the tile images
- `arthur.character`: the player (`Character`, driven by a `Controls` value)
- `arthur.skeleton`, `arthur.spirit`, `arthur.boss`: the enemies
  (`Skeleton`, `Spirit`, `Boss`)
- `arthur.background`: `Background`, the backdrop image scaled to the window
- `arthur.app`: the `World` that advances everything one frame at a time
  through `World.step`, the `Outcome` of a game, and `run` / `main` to start
  the game

Example:

```python
from arthur.app import World
from arthur.character import Controls

world = World()
world.step(1 / 60, Controls(right=True))
print(world.camera_center(), world.outcome())
```

`World.step` returns `None` while the game is running and an `Outcome`
(`Outcome.WON` or `Outcome.LOST`) once it is decided.

## Tests

```
pip install .[test]
pytest
```