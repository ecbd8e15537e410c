"""A broadcast chat over websockets: a server and a line-based client."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections import deque
from typing import Any, AsyncIterable, AsyncIterator, Awaitable, Iterable

import websockets

WELCOME = "Welcome to chat! Type a message"
BROADCAST_CAPACITY = 16
"""How many messages a subscriber may fall behind before it lags."""


class _Subscription:
    """One receiver of a Broadcaster's messages."""

    def __init__(self, broadcaster: Broadcaster) -> None:
        self._broadcaster = broadcaster
        self._messages: deque[str] = deque()
        self._lagged = 0
        self._ready = asyncio.Event()

    def _push(self, message: str) -> None:
        if len(self._messages) >= self._broadcaster.capacity:
            self._messages.popleft()
            self._lagged += 1
        self._messages.append(message)
        self._ready.set()

    async def recv(self) -> str:
        """Wait for the next message; raise OverflowError if some were lost."""
        while not self._messages and not self._lagged:
            self._ready.clear()
            await self._ready.wait()
        if self._lagged:
            lost, self._lagged = self._lagged, 0
            raise OverflowError(f"receiver lagged behind by {lost} messages")
        return self._messages.popleft()

    def close(self) -> None:
        """Stop receiving messages."""
        self._broadcaster._unsubscribe(self)

    def __enter__(self) -> _Subscription:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class Broadcaster:
    """Delivers every message sent to each current subscriber."""

    def __init__(self, capacity: int = BROADCAST_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: list[_Subscription] = []

    def subscribe(self) -> _Subscription:
        """Return a new subscription that receives messages sent from now on."""
        subscription = _Subscription(self)
        self._subscribers.append(subscription)
        return subscription

    def send(self, message: str) -> int:
        """Deliver the message to all subscribers and return how many there are."""
        for subscription in self._subscribers:
            subscription._push(message)
        return len(self._subscribers)

    def _unsubscribe(self, subscription: _Subscription) -> None:
        self._subscribers = [s for s in self._subscribers if s is not subscription]


async def _first_completed(*coroutines: Awaitable[None]) -> None:
    """Run the coroutines until one finishes, then cancel the rest."""
    tasks = [asyncio.ensure_future(coroutine) for coroutine in coroutines]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
    for task in done:
        task.result()


async def handle_connection(websocket: Any, broadcaster: Broadcaster) -> None:
    """Relay a client's text messages to everyone, and everyone's to the client."""
    addr = websocket.remote_address
    await websocket.send(WELCOME)
    with broadcaster.subscribe() as subscription:

        async def incoming() -> None:
            async for message in websocket:
                if isinstance(message, str):
                    print(f"From client {addr!r} {message!r}")
                    broadcaster.send(message)

        async def outgoing() -> None:
            while True:
                await websocket.send(await subscription.recv())

        await _first_completed(incoming(), outgoing())


async def serve(host: str = "127.0.0.1", port: int = 2000) -> None:
    """Run the chat server until cancelled."""
    broadcaster = Broadcaster()

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        await handle_connection(websocket, broadcaster)

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


async def _as_async(lines: Iterable[str] | AsyncIterable[str]) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        async for line in lines:
            yield line
    else:
        for line in lines:
            yield line


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    pending: asyncio.Queue[str | None] = asyncio.Queue()

    def pump() -> None:
        try:
            for line in sys.stdin:
                loop.call_soon_threadsafe(pending.put_nowait, line)
            loop.call_soon_threadsafe(pending.put_nowait, None)
        except RuntimeError:
            return

    threading.Thread(target=pump, daemon=True).start()
    while (line := await pending.get()) is not None:
        yield line.removesuffix("\n").removesuffix("\r")


async def run_client(
    uri: str = "ws://127.0.0.1:2000",
    lines: Iterable[str] | AsyncIterable[str] | None = None,
) -> list[str]:
    """Send each line to the server and print what it sends back.

    Stops when the lines run out or the server closes the connection, and
    returns the text messages received.
    """
    source = _stdin_lines() if lines is None else _as_async(lines)
    received: list[str] = []
    async with websockets.connect(uri) as websocket:

        async def incoming() -> None:
            async for message in websocket:
                if isinstance(message, str):
                    print(f"From server: {message}")
                    received.append(message)

        async def outgoing() -> None:
            async for line in source:
                await websocket.send(line)

        await _first_completed(incoming(), outgoing())
    return received


def main_server(argv: list[str] | None = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Broadcast chat server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main_client(argv: list[str] | None = None) -> int:
    """Run the chat client, reading lines from standard input."""
    parser = argparse.ArgumentParser(description="Broadcast chat client.")
    parser.add_argument("--uri", default="ws://127.0.0.1:2000")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except KeyboardInterrupt:
        return 0
    except (OSError, websockets.exceptions.WebSocketException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main_server())