# fastchat

fastchat is an in-memory model of a small chat service: users, chat rooms and
messages. It also ships a command that runs a short demonstration and then
serves a tiny HTTP endpoint.

## Modules

- `fastchat.chat_server` – `ChatServer` registers users, logs them in and out,
  and creates and finds chat rooms.
- `fastchat.chat_room` – `ChatRoom` keeps its members (`users`) and the
  messages posted in it (`chat_history`), both as tuples in order. It tells
  its `MessageNotifier` when someone joins, leaves or posts.
- `fastchat.user` – `User` holds a `username` and a `password_hash`, and
  `check_password(password, hasher)` checks a password against the hash.
- `fastchat.message` – `Message` holds a `sender`, the `content` and a
  `timestamp` (UTC, set when the message is created).
- `fastchat.password_hasher` – `PasswordHasher` is the abstract interface;
  `Sha512PasswordHasher` stores passwords as lowercase hex SHA-512 digests.
- `fastchat.message_notifier` – `MessageNotifier` is the abstract interface
  for room events; `ConsoleMessageNotifier` writes one line per event to
  standard output, or to a stream passed to its constructor.
- `fastchat.app` – the `fastchat` command, `print_users_in_room(room)`,
  `create_http_server(host, port)` and the `PingHandler` request handler.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from fastchat.chat_server import ChatServer
from fastchat.message import Message
from fastchat.message_notifier import ConsoleMessageNotifier
from fastchat.password_hasher import Sha512PasswordHasher

server = ChatServer(Sha512PasswordHasher())

password = "password"
server.register_user("bob", password)
bob = server.login("bob", password)

room = server.create_room("general", ConsoleMessageNotifier())
room.join(bob)                           # prints "bob joined the room"
room.post_message(Message("bob", "hi"))  # prints "bob': hi"
assert server.find_room("general") is room
server.logout("bob")                     # prints "bob left the room"
```

Some calls have no effect, and those that return something return `None`,
rather than raising an error:

- registering a username that already exists;
- logging in with an unknown user, with a wrong password, or as a user who is
  already online;
- creating a room whose name is already taken;
- looking up a room that does not exist;
- joining a room twice, or leaving a room one is not in;
- logging out a user who is not online;
- posting a message whose sender is not in the room.

Logging out removes the user from every room they are in.

`ValueError` is raised when a required value is empty or missing: a room
name, a username, a password, a password hash, a message sender or content,
a notifier, a hasher, or the user or message passed to a room.

## Running the command

```
fastchat
fastchat -p 9000
```

The command first runs a short demonstration. It registers two users, puts
them into rooms, and prints who is in each room as they join, leave and log
out.

After that it serves HTTP on `0.0.0.0`, by default on port 8080; `-p` sets a
different port. `GET /ping` answers `pong` as plain text and every other path
answers 404. Press Ctrl+C to stop the server.

## What it does not do

- All state lives in memory; nothing is stored between runs.
- The HTTP server exposes only `/ping`. Users, rooms and messages cannot be
  reached over HTTP; they are used through the Python classes.