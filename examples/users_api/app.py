"""Users API — a JSON CRUD function behind a function URL.

Demonstrates ``:id`` path parameters, ``HandlerError`` for failures,
request bodies via ``request.json()``, and a CORS allow-list.

Deploy with the handler set to ``app.app``; the runtime calls
``app(event, context)`` once per request.
"""

import threading
from dataclasses import asdict, dataclass

from finch import App, HandlerError, RouterConfig

app = App(RouterConfig(
    origins=["https://admin.example.com"],
    methods=["GET", "POST", "PUT", "DELETE"],
    headers=["Content-Type", "Authorization"],
))


# ---------------------------------------------------------------------------
# In-memory storage (one per warm container)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


_users: dict[int, User] = {}
_next_id = 1
_lock = threading.Lock()


def _lookup(raw_id: str) -> User:
    if not raw_id.isdigit() or int(raw_id) not in _users:
        raise HandlerError(404, f"user {raw_id} not found")
    return _users[int(raw_id)]


def _name_from(request) -> str:
    try:
        data = request.json()
    except ValueError:
        raise HandlerError(400, "body must be JSON") from None
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise HandlerError(422, "name is required")
    return name.strip()


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/users")
def list_users(ctx, request, params):
    return [asdict(u) for u in sorted(_users.values(), key=lambda u: u.id)]


@app.post("/users")
def create_user(ctx, request, params):
    global _next_id
    name = _name_from(request)
    with _lock:
        user = User(id=_next_id, name=name)
        _users[user.id] = user
        _next_id += 1
    return asdict(user)


@app.get("/users/:id")
def get_user(ctx, request, params):
    return asdict(_lookup(params["id"]))


@app.put("/users/:id")
def rename_user(ctx, request, params):
    user = _lookup(params["id"])
    renamed = User(id=user.id, name=_name_from(request))
    _users[user.id] = renamed
    return asdict(renamed)


@app.delete("/users/:id")
def delete_user(ctx, request, params):
    user = _lookup(params["id"])
    del _users[user.id]
    return {"deleted": user.id}
