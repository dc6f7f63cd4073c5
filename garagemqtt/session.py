"""Client session state: messages, packet ids, topic matching and handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional, Tuple

from garagemqtt.callback import Callback

MAX_PACKET_ID = 65535
MAX_REMAINING_LENGTH_BYTES = 4
DEFAULT_MAX_HANDLERS = 5
MAX_INCOMING_QOS2_MESSAGES = 10


class QoS(IntEnum):
    """MQTT quality of service levels."""

    QOS0 = 0
    QOS1 = 1
    QOS2 = 2


@dataclass
class Message:
    """An application message sent or received on a topic."""

    qos: QoS = QoS.QOS0
    retained: bool = False
    dup: bool = False
    id: int = 0
    payload: bytes = b""


@dataclass
class MessageData:
    """What a message handler receives: the topic and the message."""

    topic_name: str
    message: Message


@dataclass
class ConnackData:
    """The return code and session-present flag of a CONNACK."""

    rc: int = 0
    session_present: bool = False


@dataclass
class SubackData:
    """The QoS the broker granted for a subscription."""

    granted_qos: int = 0


class PacketId:
    """Hands out packet identifiers 1..65535, wrapping back to 1."""

    def __init__(self) -> None:
        self._last = 0

    def next(self) -> int:
        """Return the next packet identifier."""
        self._last = 1 if self._last == MAX_PACKET_ID else self._last + 1
        return self._last


def is_topic_matched(topic_filter: str, topic_name: str) -> bool:
    """Return True if ``topic_name`` matches ``topic_filter``.

    The filter is assumed well formed: ``#`` only at the end, and ``+`` and
    ``#`` only next to a separator.
    """
    f = 0
    n = 0
    filter_end = len(topic_filter)
    name_end = len(topic_name)
    while f < filter_end and n < name_end:
        fc = topic_filter[f]
        nc = topic_name[n]
        if nc == "/" and fc != "/":
            break
        if fc not in "+#" and fc != nc:
            break
        if fc == "+":
            # skip to the next separator or the end of the name
            while n + 1 < name_end and topic_name[n + 1] != "/":
                n += 1
        elif fc == "#":
            n = name_end - 1
        f += 1
        n += 1
    return n == name_end and f == filter_end


def decode_remaining_length(read_byte: Callable[[], Optional[int]]) -> Tuple[int, int]:
    """Decode an MQTT variable-length "remaining length" field.

    ``read_byte`` returns the next byte, or None when no byte could be read.
    Returns the decoded value and the number of bytes read. Raises
    ValueError if the field runs past four bytes.
    """
    value = 0
    multiplier = 1
    count = 0
    while True:
        if count >= MAX_REMAINING_LENGTH_BYTES:
            raise ValueError("remaining length field longer than 4 bytes")
        byte = read_byte()
        if byte is None:
            return value, count
        count += 1
        value += (byte & 127) * multiplier
        multiplier *= 128
        if not byte & 128:
            return value, count


@dataclass
class _HandlerSlot:
    topic_filter: Optional[str]
    callback: Callback


class HandlerTable:
    """Message handlers indexed by topic filter, plus a default handler."""

    def __init__(self, max_handlers: int = DEFAULT_MAX_HANDLERS) -> None:
        if max_handlers < 0:
            raise ValueError("max_handlers must not be negative")
        self._slots: List[_HandlerSlot] = [
            _HandlerSlot(None, Callback()) for _ in range(max_handlers)
        ]
        self._default = Callback()

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot.topic_filter is not None)

    def __contains__(self, topic_filter: object) -> bool:
        return any(slot.topic_filter == topic_filter for slot in self._slots)

    def set(
        self, topic_filter: str, handler: Optional[Callable[[MessageData], object]]
    ) -> bool:
        """Set or, with ``handler`` None, remove the handler for a filter.

        Returns True if the filter was found or stored, False if it was not
        there to remove or no free slot was left.
        """
        existing = next(
            (slot for slot in self._slots if slot.topic_filter == topic_filter), None
        )
        if handler is None:
            if existing is None:
                return False
            existing.topic_filter = None
            existing.callback.detach()
            return True
        slot = existing
        if slot is None:
            slot = next((s for s in self._slots if s.topic_filter is None), None)
            if slot is None:
                return False
        slot.topic_filter = topic_filter
        slot.callback.attach(handler)
        return True

    def set_default(self, handler: Optional[Callable[[MessageData], object]]) -> None:
        """Set the handler for messages no filter matches; None removes it."""
        if handler is None:
            self._default.detach()
        else:
            self._default.attach(handler)

    def clear(self) -> None:
        """Forget every topic filter; the default handler stays."""
        for slot in self._slots:
            slot.topic_filter = None

    def deliver(self, topic_name: str, message: Message) -> bool:
        """Pass a message to every matching handler, else to the default.

        Returns True if some handler was called.
        """
        delivered = False
        for slot in self._slots:
            if slot.topic_filter is None:
                continue
            if slot.topic_filter == topic_name or is_topic_matched(
                slot.topic_filter, topic_name
            ):
                if slot.callback.attached():
                    slot.callback(MessageData(topic_name, message))
                    delivered = True
        if not delivered and self._default.attached():
            self._default(MessageData(topic_name, message))
            delivered = True
        return delivered


class IncomingQoS2:
    """Ids of incoming QoS 2 messages awaiting their PUBREL."""

    def __init__(self, capacity: int = MAX_INCOMING_QOS2_MESSAGES) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._ids: List[int] = [0] * capacity

    def is_free(self, msgid: int) -> bool:
        """Return True if ``msgid`` is not being held."""
        return msgid not in self._ids

    def use(self, msgid: int) -> bool:
        """Hold ``msgid`` in a free place; False if none is left."""
        try:
            place = self._ids.index(0)
        except ValueError:
            return False
        self._ids[place] = msgid
        return True

    def free(self, msgid: int) -> None:
        """Release ``msgid`` if it is held."""
        try:
            self._ids[self._ids.index(msgid)] = 0
        except ValueError:
            pass

    def clear(self) -> None:
        """Release every held id."""
        self._ids = [0] * len(self._ids)