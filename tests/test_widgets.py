from ugine.controls import GuiRender, GuiState
from ugine.events import Controller, Event, KeyEvent, MouseEvent
from ugine.image import Image
from ugine.widgets import Button, CheckBox, CheckBoxGroup


class Listener:
    def __init__(self):
        self.senders = []

    def manage_control_event(self, sender):
        self.senders.append(sender)


class Recorder:
    def __init__(self):
        self.calls = []

    def draw_image(self, image, x, y):
        self.calls.append(("image", image, x, y))

    def set_color(self, red, green, blue, alpha):
        self.calls.append(("color", (red, green, blue, alpha)))

    def draw_text(self, font, text, x, y):
        self.calls.append(("text", font, text, x, y))


def gui():
    imgs = [Image(40, 20) for _ in range(3)]
    for img in imgs:
        img.set_mid_handle()
    return GuiRender(None, *imgs)


def mouse(event_id, x, y):
    return Event(Controller.MOUSE, event_id, x, y)


def test_button_press_and_release_notifies():
    button = Button(100, 100, gui(), 1)
    listener = Listener()
    button.add_listener(listener)
    assert button.manage_event(mouse(MouseEvent.LMB_PRESS, 100, 100)) is True
    assert button.state is GuiState.ON_CLICK
    assert button.manage_event(mouse(MouseEvent.LMB_RELEASE, 100, 100)) is True
    assert button.state is GuiState.DEFAULT
    assert listener.senders == [button]


def test_button_press_outside_is_ignored():
    button = Button(100, 100, gui())
    assert button.manage_event(mouse(MouseEvent.LMB_PRESS, 300, 300)) is False
    assert button.state is GuiState.DEFAULT
    assert button.pressed is False


def test_release_without_press_does_not_notify():
    button = Button(100, 100, gui())
    listener = Listener()
    button.add_listener(listener)
    assert button.manage_event(mouse(MouseEvent.LMB_RELEASE, 100, 100)) is False
    assert listener.senders == []


def test_moving_out_cancels_press():
    button = Button(100, 100, gui())
    listener = Listener()
    button.add_listener(listener)
    button.manage_event(mouse(MouseEvent.LMB_PRESS, 100, 100))
    assert button.manage_event(mouse(MouseEvent.MOUSE_MOVED, 500, 500)) is True
    assert button.state is GuiState.DEFAULT
    button.manage_event(mouse(MouseEvent.LMB_RELEASE, 100, 100))
    assert listener.senders == []


def test_inactive_button_ignores_events():
    button = Button(100, 100, gui())
    button.state = GuiState.INACTIVE
    assert button.manage_event(mouse(MouseEvent.LMB_PRESS, 100, 100)) is False
    assert button.state is GuiState.INACTIVE


def test_keyboard_event_ignored():
    button = Button(100, 100, gui())
    assert button.manage_event(Event(Controller.KEYBOARD, KeyEvent.SPACE, 100, 100)) is False


def test_mouse_is_over_edges():
    button = Button(100, 100, gui())
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 120, 110)) is True
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 80, 90)) is True
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 121, 100)) is False
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 100, 111)) is False


def test_set_position_moves_hit_area():
    button = Button(100, 100, gui())
    button.set_position(300, 300)
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 300, 300)) is True
    assert button.mouse_is_over(mouse(MouseEvent.MOUSE_MOVED, 100, 100)) is False


def test_set_text_stores_caption():
    button = Button(0, 0, gui())
    button.set_text("Click")
    assert button.gui_render.text == "Click"


def test_button_render_uses_state_image():
    render = gui()
    button = Button(10, 20, render)
    button.state = GuiState.ON_CLICK
    rec = Recorder()
    button.render(rec)
    assert rec.calls[0] == ("image", render.on_click_img, 10.0, 20.0)


def make_group():
    group = CheckBoxGroup(0)
    boxes = [CheckBox(100 + 40 * i, 100, gui(), i) for i in range(3)]
    for box in boxes:
        group.add_control(box)
    return group, boxes


def test_checkbox_click_marks_group_active():
    group, boxes = make_group()
    listener = Listener()
    group.add_listener(listener)
    boxes[0].state = GuiState.ON_CLICK
    assert boxes[1].manage_event(mouse(MouseEvent.LMB_CLICK, 140, 100)) is True
    assert group.active is boxes[1]
    assert [b.state for b in boxes] == [GuiState.DEFAULT, GuiState.ON_CLICK, GuiState.DEFAULT]
    assert listener.senders == [group]


def test_clicking_checked_box_consumes_without_notifying():
    group, boxes = make_group()
    listener = Listener()
    group.add_listener(listener)
    boxes[0].state = GuiState.ON_CLICK
    assert boxes[0].manage_event(mouse(MouseEvent.LMB_CLICK, 100, 100)) is True
    assert listener.senders == []


def test_checkbox_ignores_press_and_outside_click():
    group, boxes = make_group()
    assert boxes[2].manage_event(mouse(MouseEvent.LMB_PRESS, 180, 100)) is False
    assert boxes[2].manage_event(mouse(MouseEvent.LMB_CLICK, 500, 100)) is False
    assert group.active is None


def test_group_dispatches_events_to_boxes():
    group, boxes = make_group()
    assert group.manage_event(mouse(MouseEvent.LMB_CLICK, 180, 100)) is True
    assert group.active is boxes[2]


def test_group_accepts_only_checkboxes():
    group = CheckBoxGroup()
    group.add_control(Button(0, 0, gui()))
    assert group.controls == []


def test_group_remove_control():
    group, boxes = make_group()
    assert boxes[0].group is group
    assert group.remove_control(boxes[0]) is True
    assert boxes[0].group is None
    assert group.remove_control(boxes[0]) is False
    assert group.remove_control(Button(0, 0, gui())) is False