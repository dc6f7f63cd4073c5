# garagemqtt

`garagemqtt` holds the status vocabulary of a garage door controller and the
pieces an MQTT client keeps its session with: messages, packet identifiers,
topic filter matching, subscription handlers, QoS 2 bookkeeping, a deadline
timer, a callback slot and simple diagnostic output. It has no dependencies
outside the standard library.

## Modules

- `garagemqtt.types` – `Command` (`OPEN`, `CLOSE`, `STOP`, `CALIB`, `NONE`),
  `DoorState` (`OPENING`, `OPENED`, `CLOSING`, `CLOSED`, `IDLE`),
  `ErrorState` (`NORMAL`, `STUCK`), `CalibState` (`UNCALIBRATED`,
  `CALIBRATED`) and the `Status` dataclass (`door_state`, `error_state`,
  `calib_state`, `moving`, `total_steps`). `door_state_string`,
  `error_state_string` and `calib_state_string` return a state's name, or
  `"UNKNOWN"` for a value that is not one of its states. The module also
  defines the topic and message strings `STATUS_TOPIC`
  (`"garage/door/status"`), `COMMAND_TOPIC`, `RESPONSE_TOPIC`, `REBOOT_MSG`,
  `SUCCESS_MSG`, `STUCK_MSG` and `NO_CALIB_MSG`.
- `garagemqtt.diagnostics` – `dprint(message)` or `dprint(name, value)`
  prints a line prefixed with a microsecond timestamp; any other number of
  arguments raises `TypeError`. `debug`, `log`, `warn` and `error` take a
  `%`-style format and arguments and write a tagged line naming the calling
  function and line number to standard output; `error` then raises
  `SystemExit(1)`.
- `garagemqtt.callback` – `Callback`, a slot for one callable: `attach`
  (raises `TypeError` for a non-callable), `detach`, `attached()`, and calling
  the object with one argument, which returns `None` when nothing is attached.
- `garagemqtt.timers` – `Countdown(ms=None, clock=None)`, a deadline with
  `countdown_ms`, `countdown` (seconds), `expired()` and `left_ms()` (never
  below zero). `clock` returns seconds and defaults to `time.monotonic`; a
  timer made without a duration is already expired.
- `garagemqtt.session` – `QoS`, the `Message`, `MessageData`, `ConnackData`
  and `SubackData` dataclasses, `PacketId`, `is_topic_matched`,
  `decode_remaining_length`, `HandlerTable` and `IncomingQoS2`.

## Topic matching

```python
from garagemqtt.session import is_topic_matched

is_topic_matched("garage/+/status", "garage/door/status")   # True
is_topic_matched("garage/#", "garage/door/command")         # True
is_topic_matched("garage/door/status", "garage/door")       # False
```

`+` matches one level and `#` everything that follows. Filters are assumed to
be well formed: `#` only at the end, and both wildcards only next to a `/`.

## Handlers

```python
from garagemqtt.session import HandlerTable, Message

table = HandlerTable()          # five slots by default
table.set("garage/door/command", lambda data: print(data.message.payload))
table.set_default(lambda data: print("unmatched", data.topic_name))

table.deliver("garage/door/command", Message(payload=b"OPEN"))   # True
table.set("garage/door/command", None)                           # removes it
```

`set` returns `False` when there is no free slot, or when removing a filter
that is not there. `deliver` calls every handler whose filter equals or
matches the topic, and the default handler only when none did; it returns
whether any handler was called. `clear` forgets the filters but keeps the
default handler.

## Packet ids, lengths and QoS 2

`PacketId().next()` counts 1, 2, … up to 65535 and wraps back to 1.

`decode_remaining_length(read_byte)` decodes MQTT's variable-length field
from a function returning the next byte (or `None` when none could be read)
and returns `(value, bytes_read)`; a field longer than four bytes raises
`ValueError`.

```python
from garagemqtt.session import decode_remaining_length

data = iter([0x80, 0x01])
decode_remaining_length(lambda: next(data, None))   # (128, 2)
```

`IncomingQoS2` holds up to ten ids by default: `is_free`, `use` (returns
`False` when full), `free` and `clear`.

## Timers with a test clock

```python
from garagemqtt.timers import Countdown

now = [0.0]
timer = Countdown(1500, clock=lambda: now[0])
timer.left_ms()     # 1500
now[0] = 2.0
timer.expired()     # True
```

## What the package does not do

There is no network transport and no MQTT client here: nothing opens a
socket, encodes or sends packets, connects to a broker, subscribes or
publishes. The session pieces above are what such a client keeps its state
with; the package provides no command-line program.