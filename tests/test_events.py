import pytest

from coldlight.codes import Key, Mouse
from coldlight.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_window_resize_string():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.width == 1280 and event.height == 720


@pytest.mark.parametrize(
    "cls, expected",
    [
        (WindowCloseEvent, "WindowClose"),
        (AppTickEvent, "AppTick"),
        (AppUpdateEvent, "AppUpdate"),
        (AppRenderEvent, "AppRender"),
    ],
)
def test_simple_events_print_their_name(cls, expected):
    event = cls()
    assert event.name == expected
    assert str(event) == expected
    assert event.is_in_category(EventCategory.APPLICATION)


@pytest.mark.parametrize(
    "event, expected_type",
    [
        (WindowResizeEvent(1, 2), EventType.WINDOW_RESIZE),
        (KeyPressedEvent(Key.A), EventType.KEY_PRESSED),
        (KeyReleasedEvent(Key.A), EventType.KEY_RELEASED),
        (KeyTypedEvent(Key.A), EventType.KEY_TYPED),
        (MouseMovedEvent(1.0, 2.0), EventType.MOUSE_MOVED),
        (MouseScrolledEvent(1.0, 2.0), EventType.MOUSE_SCROLLED),
        (MouseButtonPressedEvent(Mouse.BUTTON_LEFT), EventType.MOUSE_BUTTON_PRESSED),
        (MouseButtonReleasedEvent(Mouse.BUTTON_LEFT), EventType.MOUSE_BUTTON_RELEASED),
    ],
)
def test_event_types_and_names(event, expected_type):
    assert event.event_type is expected_type
    assert event.name == expected_type.label
    assert str(event).startswith(f"{type(event).__name__}: ")


def test_key_pressed_string_shows_repeat_flag():
    assert str(KeyPressedEvent(Key.A, True)) == "KeyPressedEvent: 65 (repeat = 1)"
    assert str(KeyPressedEvent(Key.A)).endswith("(repeat = 0)")


def test_key_released_and_typed_strings():
    code = str(int(Key.SPACE))
    assert str(KeyReleasedEvent(Key.SPACE)) == "KeyReleasedEvent: " + code
    assert str(KeyTypedEvent(Key.SPACE)) == "KeyTypedEvent: " + code


def test_mouse_moved_string_formats_floats():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"


def test_mouse_button_string():
    event = MouseButtonPressedEvent(Mouse.BUTTON_RIGHT)
    assert str(event) == "MouseButtonPressedEvent: " + str(int(Mouse.BUTTON_RIGHT))


def test_keyboard_categories():
    event = KeyPressedEvent(Key.A)
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.APPLICATION)


def test_mouse_categories():
    button = MouseButtonReleasedEvent(Mouse.BUTTON_0)
    moved = MouseMovedEvent(0.0, 0.0)
    assert button.is_in_category(EventCategory.MOUSE_BUTTON)
    assert button.is_in_category(EventCategory.MOUSE)
    assert not moved.is_in_category(EventCategory.MOUSE_BUTTON)
    assert moved.is_in_category(EventCategory.INPUT)


def test_none_category_never_matches():
    assert not WindowResizeEvent(1, 1).is_in_category(EventCategory.NONE)


@pytest.mark.parametrize("factory", [Event, lambda: KeyEvent(1), lambda: MouseButtonEvent(0)])
def test_abstract_events_cannot_be_created(factory):
    with pytest.raises(TypeError):
        factory()


def test_dispatch_matching_handler_marks_handled():
    event = KeyPressedEvent(Key.ESCAPE)
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(KeyPressedEvent, handler) is True
    assert event.handled is True
    assert seen == [event]


def test_dispatch_non_matching_skips_handler():
    event = WindowCloseEvent()
    seen = []
    assert EventDispatcher(event).dispatch(KeyPressedEvent, seen.append) is False
    assert seen == []
    assert event.handled is False


def test_dispatch_keeps_handled_once_set():
    event = WindowResizeEvent(10, 20)
    dispatcher = EventDispatcher(event)
    assert dispatcher.dispatch(WindowResizeEvent, lambda e: True)
    assert dispatcher.dispatch(WindowResizeEvent, lambda e: False)
    assert event.handled is True


def test_dispatch_with_unhandled_result():
    event = AppTickEvent()
    assert EventDispatcher(event).dispatch(AppTickEvent, lambda e: False)
    assert event.handled is False


def test_dispatch_abstract_class_never_matches():
    event = KeyTypedEvent(Key.A)
    assert EventDispatcher(event).dispatch(KeyEvent, lambda e: True) is False
    assert event.handled is False


def test_event_type_labels():
    assert WindowResizeEvent(3, 4).event_type.label == "WindowResize"
    pressed = MouseButtonPressedEvent(Mouse.BUTTON_LEFT)
    assert pressed.event_type.label == "MouseButtonPressed"