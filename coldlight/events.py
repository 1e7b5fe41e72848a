"""Engine events, their categories and a type-based dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag, auto
from typing import Callable, ClassVar


class EventType(IntEnum):
    """Kinds of events the engine emits."""

    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    WINDOW_FOCUS = auto()
    WINDOW_LOST_FOCUS = auto()
    WINDOW_MOVED = auto()
    APP_TICK = auto()
    APP_UPDATE = auto()
    APP_RENDER = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    KEY_TYPED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_SCROLLED = auto()

    @property
    def label(self) -> str:
        """The type's name in CamelCase, e.g. ``WindowResize``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    """Bit flags grouping event types."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


@dataclass
class Event:
    """Base of all events; concrete subclasses set ``event_type``."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True, compare=False)

    def __post_init__(self) -> None:
        if type(self).event_type is EventType.NONE:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be created")

    @property
    def name(self) -> str:
        return self.event_type.label

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


class EventDispatcher:
    """Hands an event to a handler when the event is of the requested class."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; return whether it matched."""
        if self.event.event_type != event_class.event_type:
            return False
        self.event.handled |= bool(func(self.event))
        return True


# Application events

@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# Keyboard events

@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED

    is_repeat: bool = False

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} (repeat = {int(self.is_repeat)})"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


# Mouse events

@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {self.x:g}, {self.y:g}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {self.x_offset:g}, {self.y_offset:g}"


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags: ClassVar[EventCategory] = (
        EventCategory.MOUSE | EventCategory.INPUT | EventCategory.MOUSE_BUTTON
    )

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"