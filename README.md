# ktg

A small collection of building blocks:

- **`ktg.myvector.MyVector`**: a growable array that tracks its own capacity.
  The capacity starts at 1 and doubles as elements are added. Access is
  bounds-checked.
- **`ktg.vector.Vector`**: a second growable array. It supports copying,
  comparison, `swap`, `reserve` and `shrink_to_fit`.
- **`ktg.thread_timer.Timer`**: a timer that calls a function on a background
  daemon thread until it is stopped.
- **`ktg.timer_manager.TimerManager`**: holds timers ordered by due time and
  fires the ones that are due each time `update()` is called from your own
  loop.
- **`ktg.echo_server.EchoServer`** and **`ktg.echo_client`**: a
  `select`-driven TCP echo server and a client that talks to it.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Arrays

### MyVector

```python
from ktg.myvector import MyVector

vec = MyVector()
for i in range(10):
    vec.push_back(i)

print(len(vec), vec.capacity())  # 10 16
vec.erase(2, 5)                  # removes positions 2, 3 and 4
print(list(vec))                 # [0, 1, 5, 6, 7, 8, 9]
vec.insert(0, 7, 2)              # two copies of 7 before position 0
vec.at(42)                       # raises IndexError
```

Positions are plain non-negative indices. Negative indices raise `IndexError`;
they do not count from the end. `front()` and `back()` raise `IndexError` on
an empty vector. `pop_back()` on an empty vector does nothing. The class also
has `assign(n, value)`, `resize(n, value)`, `reserve(n)`, `clear()`,
`swap(other)`, `empty()` and `display()`. `display()` prints the size, the
capacity and the elements.

### Vector

```python
from ktg.vector import Vector

v = Vector([1, 2, 3])        # capacity 3
v.push_back(4)               # capacity doubles to 6
v.reserve(16)                # capacity exactly 16
v.shrink_to_fit()            # capacity back to 4
print(v.front(), v.back(), len(v), v.capacity())   # 1 4 4 4

w = Vector.filled(3, "x")    # ['x', 'x', 'x']
```

`insert(pos, value)` inserts one element and returns its index.
`erase(first)` removes one element and `erase(first, last)` removes the range
`[first, last)`. Both return `first`. Vectors compare equal when their
elements are equal. `copy.copy(v)` gives a copy whose capacity equals its
size.

## Timers

### Timer on a background thread

```python
from ktg.thread_timer import Timer

t = Timer()                  # repeat < 0: run until stopped
t.start(2000, print, "tick") # prints "tick" every 2 seconds
# ...
t.stop()
```

The `repeat` argument controls how long the timer runs:

- With a negative `repeat` (the default), the timer calls the function once
  per period until `stop()` is called.
- With a non-negative `repeat`, the timer runs that many rounds. Each round
  waits one period and then calls the function twice. Between the two calls
  it checks whether the timer was stopped.

`start()` is ignored while the timer is running. `active()` tells whether it
is still running. `stop()` cuts a pending wait short.

### TimerManager, polled from your own loop

```python
from ktg.timer_manager import TimerManager

manager = TimerManager()
manager.schedule(1500, print, "twice", repeat=2)

while len(manager):
    manager.update()
```

`schedule()` returns the `ManagedTimer` it created. A timer is due as soon as
it is scheduled, and after each firing it becomes due again one period later.
A timer with a positive `repeat` is dropped once it has fired that many
times. With the default `repeat=-1` it stays scheduled for good.
`ManagedTimer.now()` gives the current time in milliseconds since the epoch.

## Echo server and client

```python
from ktg.echo_server import EchoServer

with EchoServer("127.0.0.1", 9999, 10) as server:
    server.serve_forever()
```

The server reads `chunk_size` bytes at a time from each client (10 by
default). It handles each chunk as follows:

1. It takes the text before the first NUL byte in the chunk.
2. It prints that text.
3. It sends the text back to the client, followed by one NUL byte.

A longer message is therefore echoed back in several pieces. `poll(timeout)`
handles one round of readiness events and returns how many there were.
`address()` returns the address the server is bound to.

```python
from ktg.echo_client import run_client, format_message

format_message(0)                        # b"hello world: 0\n\x00"
replies = run_client("127.0.0.1", 9999, 5, 1.0)
```

`run_client` sends `count` numbered greetings, or runs forever when `count`
is `None`. It waits `interval` seconds between them. It prints each reply as
`recv buf: ...` and returns the raw replies.

The same things are available as commands:

```
ktg-echo-server [--host HOST] [--port PORT] [--chunk-size N]
ktg-echo-client [--host HOST] [--port PORT] [--count N] [--interval SECONDS]
ktg-vector-demo
```

The server listens on `0.0.0.0:9999` by default. The client connects to
`127.0.0.1:9999` and sends a greeting once a second. `ktg-vector-demo` fills
a `MyVector` with the numbers 0 to 9, prints them, erases positions 2 to 4
and prints the rest.

## What it does not do

- The echo server speaks plain TCP only. It has no TLS, no authentication,
  and no protocol beyond echoing NUL-terminated chunks.
- The server and the client keep no log of what they send or receive, other
  than printing it.
- The timers keep nothing between runs.