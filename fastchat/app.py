"""Command-line entry point: a short chat demo followed by a small HTTP server."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from fastchat.chat_room import ChatRoom
from fastchat.chat_server import ChatServer
from fastchat.message_notifier import ConsoleMessageNotifier
from fastchat.password_hasher import Sha512PasswordHasher

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_log = logging.getLogger(__name__)


class PingHandler(BaseHTTPRequestHandler):
    """Answers ``GET /ping`` with a plain-text ``pong``."""

    server_version = "fastchat"

    def do_GET(self) -> None:
        if self.path.split("?", 1)[0] != "/ping":
            self.send_error(HTTPStatus.NOT_FOUND)
            return
        body = b"pong"
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)


def print_users_in_room(room: ChatRoom) -> None:
    """Print the room's name followed by one member name per line."""
    print(f"Users in room {room.name}:")
    for user in room.users:
        print(user.username)
    print(flush=True)


def create_http_server(host: str, port: int) -> ThreadingHTTPServer:
    """Return an HTTP server bound to ``host``:``port`` serving ``/ping``."""
    return ThreadingHTTPServer((host, port), PingHandler)


def _parse_port(args: Sequence[str]) -> int:
    port = DEFAULT_PORT
    for flag, value in zip(args, args[1:]):
        if flag == "-p":
            try:
                port = int(value) & 0xFFFF
            except ValueError as exc:
                raise SystemExit(f"invalid port: {value!r}") from exc
    return port


def _run_demo() -> None:
    server = ChatServer(Sha512PasswordHasher())
    server.register_user("bob", "123456")
    server.register_user("john", "123qwe")

    notifier = ConsoleMessageNotifier()
    general_room = server.create_room("general", notifier)
    teams_room = server.create_room("teams", notifier)

    bob = server.login("bob", "123456")
    john = server.login("john", "123qwe")

    general_room.join(bob)
    general_room.join(john)
    teams_room.join(bob)

    print_users_in_room(general_room)
    print_users_in_room(teams_room)

    general_room.leave("bob")

    print_users_in_room(general_room)
    print_users_in_room(teams_room)

    server.logout("bob")
    server.logout("john")

    print_users_in_room(general_room)
    print_users_in_room(teams_room)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chat demo, then serve HTTP until interrupted."""
    args = list(sys.argv[1:] if argv is None else argv)

    print("Chat server is starting...", flush=True)
    _run_demo()

    port = _parse_port(args)
    print(f"Starting HTTP server on port {port}...", flush=True)
    with create_http_server(DEFAULT_HOST, port) as http_server:
        try:
            http_server.serve_forever()
        except KeyboardInterrupt:
            pass

    print("End!", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())