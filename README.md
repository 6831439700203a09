# tilequest

A small tile-based role-playing game built with pygame. It opens a full-screen
window (1920 × 1080) on a main menu with four options: New Game, Load Game,
Settings and Quit Game. Moving the mouse over an option gives its text a thick
red outline. Left-clicking New Game starts play on a 64 × 64 tile map, with the
player's character placed in the middle and the view centred on it.

## Installing

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Playing

```
tilequest
```

The game loads its files from a `resource/` directory under the current
working directory:

- `resource/TruenoBlack-mBYV.otf`: the menu font. The menu cannot be built
  without it; a missing font raises `tilequest.resources.ResourceError`.
- `resource/brown_age_by_darkwood67.jpg`: the menu background, stretched to
  the window. Without it the menu is shown on black.
- `resource/16-Bit Fantasy Sprite Set/Sliced/world_24x24/oryx_16bit_fantasy_world_62.png`
  and `..._59.png`: the floor and wall tiles, drawn three times their size.
  Tiles whose texture did not load are not drawn.
- `resource/16-Bit Fantasy Sprite Set/Sliced/creatures_24x24/oryx_16bit_fantasy_creatures_01.png`:
  the player's texture.

Click **Quit Game**, or close the window, to leave.

## What the game does not do yet

- **Load Game** and **Settings** do nothing when clicked; there is no saving
  or loading and no settings screen.
- On the gameplay screen the player's character cannot be moved, and there is
  no way back to the menu other than closing the window.
- The map is all ground; walls and water exist as terrain kinds but no level
  places them, and there are no other creatures.
- `GameOverState` is an empty screen that nothing leads to.

## Using it as a library

- `tilequest.game.Game` takes a window and an optional
  `ResourceManager`, builds the main menu, and `update()` runs one frame:
  input, drawing and any requested state change. `current_state()` is `None`
  once the game has shut down. `tilequest.game.main()` is the `tilequest`
  command.
- `tilequest.window.Window` wraps the pygame display; it is a context manager
  that closes the window on exit, and `poll_events()` yields `Closed`,
  `MouseMoved` and `MouseButtonPressed` from `tilequest.events`.
- `tilequest.state` has `GameState`, whose component tables hold one slot per
  entity (at most 1024), with `StateID` and `TransitionID`.
  `tilequest.main_menu.MainMenuState` and `tilequest.gameplay.GameplayState`
  are the two screens in use.
- `tilequest.components` holds the components (`TextComponent`,
  `SpriteComponent`, `TransformComponent`, `BoundingBoxComponent`,
  `MouseOverComponent`, `LeftClickComponent`, `WidgetComponent`,
  `CreatureComponent`) and `Rect`, whose `contains()` includes the left and top
  edges but not the right and bottom ones.
- `tilequest.input_system.InputSystem` and
  `tilequest.render_system.RenderSystem` dispatch events and draw entities.
- `tilequest.gamemap.Map` is the 64 × 64 grid; `tile_at(x, y)` raises
  `IndexError` outside it. `tilequest.level.Level` holds a map and its
  `map_view` (a `tilequest.level.View`).
- `tilequest.resources.ResourceManager` loads fonts, textures, sounds, music
  and documents by id, counts acquisitions, and unloads a resource when its
  last user releases it. `load()` raises `ResourceError` when the file cannot
  be read.

```python
from tilequest.level import Level

level = Level(0)
level.map_view.configure((0.0, 0.0), (1920, 1080))
level.update_view((32, 32))
print(level.map_view.size_in_tiles, len(level.map_view.visible_tiles))
```

## Running the tests

```
pytest
```