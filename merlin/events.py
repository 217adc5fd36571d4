"""Window, application, keyboard and mouse events with a type-based dispatcher."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, ClassVar


class EventType(enum.IntEnum):
    """Concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(enum.IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Event:
    """Base class of all events; concrete subclasses set the class variables."""

    event_type: ClassVar[EventType] = EventType.NONE
    event_name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True, compare=False)

    @property
    def name(self) -> str:
        return self.event_name

    def __str__(self) -> str:
        return self.event_name

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)


class EventDispatcher:
    """Routes an event to a handler when the event is of the requested class."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; return whether it matched."""
        wanted = event_class.event_type
        if wanted is EventType.NONE or self._event.event_type is not wanted:
            return False
        self._event.handled = bool(func(self._event))
        return True


# --- application events -----------------------------------------------------


@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    event_name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {int(self.width)}, {int(self.height)}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    event_name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    event_name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    event_name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    event_name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# --- keyboard events --------------------------------------------------------


@dataclass
class KeyEvent(Event):
    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    event_name: ClassVar[str] = "KeyPressed"

    repeat_count: int

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({int(self.repeat_count)} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    event_name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    event_name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


# --- mouse events -----------------------------------------------------------


@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    event_name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    event_name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    event_name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    event_name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"