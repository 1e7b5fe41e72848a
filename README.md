# coldlight

A small application framework. It has these parts:

- **Events** (`coldlight.events`): window, application, keyboard and mouse
  events. Each event class has an `EventType` and a set of `EventCategory`
  flags. An `EventDispatcher` passes an event to a handler written for one
  event class.
- **Input codes** (`coldlight.codes`): the `Key` and `Mouse` code tables,
  which are `IntEnum`s numbered as in GLFW.
- **Self-registering tests** (`coldlight.testing`): subclass `UnitTest`. Each
  instance registers itself with the process-wide `AutomaticTestFramework`.
  `run_all_tests()` runs every registered case and reports whether it passed
  or failed.
- **A scope timer** (`coldlight.timer`): `FunctionTimer` can be used as a
  context manager or as a decorator. It prints the processor time its block
  took, in milliseconds.
- **Game objects** (`coldlight.gameobject`): the `GameObject` base class, which
  has a `name` that defaults to `"unnamed"`, and the lifecycle `Flag` bits
  `ALIVE` and `WAIT_FOR_GC`.
- **Application entry point** (`coldlight.application`): `Application`,
  `TestProject`, `create_application()` and `main()`.

## Install

```
pip install .
pip install ".[test]"    # with the test dependencies
```

## Events

```python
from coldlight.events import EventDispatcher, EventCategory, KeyPressedEvent
from coldlight.codes import Key

event = KeyPressedEvent(Key.A, is_repeat=False)
assert event.is_in_category(EventCategory.KEYBOARD)

dispatcher = EventDispatcher(event)
dispatcher.dispatch(KeyPressedEvent, lambda e: e.key_code == Key.A)
assert event.handled
print(event)   # KeyPressedEvent: 65 (repeat = 0)
```

`dispatch` returns `True` when the event's type matches the requested class,
and `False` otherwise. When the types match, the handler's result is OR-ed
into `event.handled`. You cannot create the base classes `Event`, `KeyEvent`
and `MouseButtonEvent` directly. Trying to do so raises `TypeError`.

## Registering tests

```python
from coldlight.testing import AutomaticTestFramework, UnitTest

class AdditionTest(UnitTest):
    def run_test(self):
        return 1 + 1 == 2

AdditionTest("AdditionTest")
results = AutomaticTestFramework.get().run_all_tests()
# prints "AdditionTest Passed."; results == {"AdditionTest": True}
```

Test cases run in the order of their names. A pass is printed to standard
output as `<name> Passed.` and a failure to standard error as
`<name> Failed.`. If a second case has a name that is already registered, it
is ignored.

A `UnitTest` can register with another framework instead of the shared one.
Pass that framework as the `framework` argument.

## Timing a block

```python
from coldlight.timer import FunctionTimer

with FunctionTimer() as timer:
    sum(range(1_000_000))
# prints "time spanned: ... ms"; timer.elapsed_ms holds the value

@FunctionTimer()
def work():
    ...
```

The clock defaults to `time.process_time`, and you can pass another one as
`clock`. Output goes to standard output unless you pass a `stream`.

## Running the application

```
coldlight
coldlight --max-frames 100
```

The command does the following:

1. Prints `Coldlight Engine, version = v0.0.1`.
2. Runs every registered test.
3. Starts the application from `create_application()`.
4. The application prints `WindowResizeEvent: 1280, 720` and enters its main
   loop.

Without `--max-frames`, the loop runs until it is interrupted. With
`--max-frames N`, it stops after `N` frames. A negative value is rejected.

In your own code, subclass `Application` and override `on_update()`, which is
called once per frame. `stop()` ends the loop. `frame_count` holds the number
of frames that have run.

## What it does not do

There is no window, no rendering and no input handling. The package defines
window, keyboard and mouse events, but nothing creates them from a real
window or device; you build and dispatch them yourself. The default main loop
does no work per frame.