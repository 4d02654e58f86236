# lizardmeme

A small arcade game built with pygame. You play a lizard. Other lizards and saw blades scroll in from the right edge of the screen. Touch a lizard and you score a point: a sound plays and your lizard runs a short animation.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
lizardmeme
```

By default the game loads its images and sounds from `res/` in the current working directory. Use `--res` to point it at a different directory:

```
lizardmeme --res path/to/res
```

The directory must contain these files:

- `playerAnimationSpritesheet.png`: the player sprite sheet, nine frames side by side
- `lizardEmoji.png`
- `circular_saw_blade.png`
- `lizard.wav`, `lizardUpShift.wav`, `lizardDownShift.wav`: the score sounds. Each point plays one of them at random.

If any of these files is missing, the game stops with `FileNotFoundError`.

### Controls

| Key             | Action                                  |
|-----------------|-----------------------------------------|
| W / Up arrow    | move up                                 |
| S / Down arrow  | move down                               |
| A / Left arrow  | move left                               |
| D / Right arrow | move right                              |
| Space           | pause / resume                          |
| Escape          | quit                                    |

If up and down are held together, down wins. If left and right are held together, right wins.

Pressing Space also plays a score sound and starts the player animation.

The score appears at the top centre of the screen. The outlines of all hitboxes are always drawn.

The game runs at a fixed virtual resolution of 1920×1080 and targets 60 frames per second. The virtual screen is scaled to fit the window and centred in it, so the window can be resized.

## What the game does not do

Touching a saw blade removes it and does nothing else. There are no lives, no game over and no restart. The score is not saved between runs.

## Using the pieces

The game logic does not need a display and can be driven directly:

- `lizardmeme.randomizer.Randomizer(seed)`: `random_num(maximum)` returns a whole number from 1 to `maximum`. `random_spawn_time()` returns a delay from 0.6 to 1.7 seconds, in steps of 0.1.
- `lizardmeme.entities.EntityManager(randomizer)` holds the scrolling `Entity` objects. It can be iterated and supports `len()`. Its methods are:
  - `update`: spawns a lizard or saw when the spawn timer runs out.
  - `spawn`: places one entity at the right edge. There is a limit of 100 entities.
  - `update_entities`: moves entities left and drops those that have left the screen.
  - `check_collisions(player_hitboxes)`: removes the first entity that touches the player and returns a `CollisionType`.
  - `remove(index)`.
- `lizardmeme.player.Player(frame_width, frame_height)`:
  - `update(velocity, delta_time, screen_width, screen_height)` moves the player, keeps it on screen, tracks which way it faces and advances the animation.
  - `hitboxes` gives the four collision rectangles. They are mirrored when the player faces left.
  - `play_animation()` starts the score animation.
- `lizardmeme.geometry` provides `Vector2`, `Rect`, `Circle`, `check_collision_recs` and `check_collision_circle_rec`.
- `lizardmeme.game.Game(sprites, frame_width, frame_height, randomizer, on_score)` combines these into one `step(velocity, delta_time)` per frame. Each `step` returns the collision and counts the score. `toggle_pause()` flips the pause state. `on_score` is called on every point.
- `lizardmeme.game.compute_viewport(window_width, window_height)` returns the scaled, centred rectangle that the virtual screen is drawn into.

The pygame-facing parts are:

- `lizardmeme.graphics`: `Sprites.load`, `player_frame_size`, `draw_entities` and `draw_player`.
- `lizardmeme.controls.player_velocity(pressed)`.
- `lizardmeme.sound.ScoreSounds`.