# ugine

ugine is the logic core of a small 2D game engine. It has no graphics API of its own. Anything that draws does so through a renderer object that you pass in. The rest is plain Python: geometry, collisions, input handling, animation and GUI state. You can drive and test all of it without opening a window.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### Geometry and images

- `ugine.mathutil` holds geometry helpers that work in degrees:
  - trigonometry: `deg_sin`, `deg_cos`, `deg_tan`, `deg_asin`, `deg_acos`, `deg_atan`, `deg_atan2`;
  - general helpers: `log2`, `wrap_value`, `angle`, `distance`, `value_in_range`;
  - rectangles: `point_in_rect`, `closest_point_to_rect`, `rects_overlap`, `overlapping_rect`.
- `ugine.image` defines `Image`, which holds an image's metadata:
  - its size and how it is split into `hframes` × `vframes` frames;
  - its handle, set with `set_handle` or `set_mid_handle`;
  - its texture extents (`last_u` and `last_v`) once padded to a power of two.

  `Image.load(filename, hframes, vframes)` reads the size from an image file using Pillow.

### Collisions

`ugine.collision` provides these tests:

- `circle_to_circle`
- `circle_to_rect`
- `circle_to_pixels`
- `pixels_to_pixels`
- `pixels_to_rect`
- `rect_to_rect`

`CollisionPixelData` is a per-pixel mask in which opaque black pixels are solid. You can build one directly, with `from_rgba`, or with `from_file`.

### Input

- `ugine.events` defines the input types:
  - the `Event` dataclass;
  - the `Controller` enum (`MOUSE` and `KEYBOARD`);
  - the `MouseEvent` and `KeyEvent` ids.
- `ugine.gestures` provides gestures that rewrite queued events in place:
  - `ClickGesture` turns a left-button release into `LMB_CLICK` when it comes less than 0.3 s after the press. You can supply the clock it uses.
  - `DragGesture` marks mouse events as `LMB_DRAG` while the left button is held and the pointer has moved.
- `ugine.inputmanager` provides `InputManager`:
  - it queues events with `add_event`;
  - it runs its gestures with `process_gestures`;
  - it delivers each event to the observers registered for that controller and event id with `manage_events`;
  - `update` does the last two steps in turn.

  An observer registered twice for the same event gets it only once.

### Scene helpers

- `ugine.camera` provides `Camera`. It can keep to bounds and can `follow` any object that has `x` and `y`.
- `ugine.skeleton` provides skeletal animation:
  - `Bone` trees carry keyframes made of `Frame`s;
  - translation, rotation and scale between keyframes are interpolated, and rotation wraps to 0–360;
  - `SkeletonData.parse` and `SkeletonData.load` read skeleton XML into `BoneData` records.
- `ugine.particles` provides particles:
  - an `Emitter` spawns `Particle`s at a random rate per second;
  - an `Affector` rectangle gives particles that enter it new random colours and velocities.

  The emitter takes an optional `random.Random`, so runs can be reproduced.
- `ugine.tilemap` provides `TileMap`, which reads uncompressed, unencoded TMX-style XML maps. It offers:
  - `tile_id` to look up a tile;
  - `check_collision`, which takes a callable that tests each solid tile's box;
  - `ground_y`, which finds the top of the first tile at or below a point.

### Fonts

`ugine.font` provides `Font`, built from a 16×16 glyph sheet:

- in each frame, a yellow pixel marks a `Glyph`'s origin and a red pixel marks its end;
- `text_width` and `text_height` measure a string.

### GUI

- `ugine.controls` holds the GUI building blocks:
  - `Control` is the base class, with child controls and listeners;
  - `ControlManager` routes mouse events to the controls, newest first;
  - `GuiRender` holds the image for each `GuiState` and an optional caption.
- `ugine.widgets` provides `Button`, `CheckBox` and `CheckBoxGroup`.
- `ugine.slider` provides `Slider`, drawn by a `SliderRender`, with left and right step buttons.

## Example

```python
from ugine.collision import circle_to_rect
from ugine.events import Controller, Event, MouseEvent
from ugine.gestures import ClickGesture
from ugine.inputmanager import InputManager

print(circle_to_rect(0, 0, 5, 3, 3, 10, 10))  # True

manager = InputManager([ClickGesture()])

class Printer:
    def notify(self, event):
        print("clicked at", event.x, event.y)

manager.register(Printer(), Controller.MOUSE, MouseEvent.LMB_CLICK)
manager.add_event(Event(Controller.MOUSE, MouseEvent.LMB_PRESS, 10, 10))
manager.add_event(Event(Controller.MOUSE, MouseEvent.LMB_RELEASE, 10, 10))
manager.update()  # clicked at 10 10
```

## Rendering

Each `render` method takes a renderer object that supplies the drawing calls the component uses:

- controls and sliders call `draw_image`, `draw_text` and `set_color`;
- bones call `push_matrix`, `pop_matrix`, `translate_matrix`, `rotate_matrix` and `draw_image`.

## What the package does not do

ugine does not do the following:

- It opens no window and has no graphics backend.
- It does not poll the keyboard or mouse. Events must be fed to an `InputManager` by your own code.
- It has no sprite, scene or resource-cache classes.
- It has no command to run.