"""
In-memory stand-in for the supabase-py sync Client.

Supports the query-builder calls the services use (select with embedded relations and
exact counts, eq/neq/in_/ilike/or_/gte/lte, order/limit/range, single/maybe_single,
insert/update/delete), storage buckets, and auth.get_user.
"""
import copy
import re
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

from postgrest.exceptions import APIError

# embedded name -> (table, foreign key column on the parent row)
RELATIONS = {
    "profiles": ("profiles", "user_id"),
    "categories": ("categories", "category_id"),
    "projects": ("projects", "project_id"),
    "jobs": ("jobs", "job_id"),
}

TABLE_DEFAULTS = {
    "projects": {"likes_count": 0, "saves_count": 0, "comments_count": 0, "views_count": 0},
    "hire_posts": {"proposals_count": 0, "skills_required": []},
    "freelance_projects": {"deliverables": [], "tags": []},
}


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def _split_top_level(text):
    parts, depth, current = [], 0, ""
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
        else:
            current += ch
    if current.strip():
        parts.append(current.strip())
    return parts


def _like_to_regex(pattern):
    return re.compile("^" + ".*".join(re.escape(p) for p in pattern.split("%")) + "$", re.IGNORECASE | re.DOTALL)


def _ilike(value, pattern):
    return value is not None and bool(_like_to_regex(pattern).match(str(value)))


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.count_mode = None
        self.payload = None
        self.filters = []
        self.orders = []
        self.limit_n = None
        self.range_bounds = None
        self.single_mode = None

    # builders
    def select(self, columns="*", count=None):
        self.op = "select"
        self.columns = columns
        self.count_mode = count
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda r: r.get(column) == value)
        return self

    def neq(self, column, value):
        self.filters.append(lambda r: r.get(column) != value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda r: r.get(column) in values)
        return self

    def ilike(self, column, pattern):
        self.filters.append(lambda r: _ilike(r.get(column), pattern))
        return self

    def gte(self, column, value):
        self.filters.append(lambda r: r.get(column) is not None and str(r.get(column)) >= str(value))
        return self

    def lte(self, column, value):
        self.filters.append(lambda r: r.get(column) is not None and str(r.get(column)) <= str(value))
        return self

    def or_(self, expression):
        clauses = []
        for part in _split_top_level(expression):
            column, op, value = part.split(".", 2)
            clauses.append((column, op, value))

        def matches(row):
            for column, op, value in clauses:
                if op == "ilike" and _ilike(row.get(column), value):
                    return True
                if op == "eq" and str(row.get(column)) == value:
                    return True
            return False

        self.filters.append(matches)
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def range(self, start, end):
        self.range_bounds = (start, end)
        return self

    def single(self):
        self.single_mode = "single"
        return self

    def maybe_single(self):
        self.single_mode = "maybe"
        return self

    # execution
    def _matching(self):
        rows = self.db.tables.setdefault(self.table, [])
        return [r for r in rows if all(f(r) for f in self.filters)]

    def _sorted(self, rows):
        for column, desc in reversed(self.orders):
            present = [r for r in rows if r.get(column) is not None]
            missing = [r for r in rows if r.get(column) is None]
            present.sort(key=lambda r: r.get(column), reverse=desc)
            rows = present + missing
        return rows

    def _embed(self, row, columns):
        items = _split_top_level(columns)
        plain = [i for i in items if "(" not in i]
        if "*" in plain or not plain:
            out = copy.deepcopy(row)
        else:
            out = {c: copy.deepcopy(row.get(c)) for c in plain}
        for item in items:
            if "(" not in item:
                continue
            name, inner = item.split("(", 1)
            name = name.strip()
            inner = inner[:-1]
            table, fk = RELATIONS[name]
            target = next((t for t in self.db.tables.get(table, []) if t.get("id") == row.get(fk)), None)
            out[name] = self._embed(target, inner) if target is not None else None
        return out

    def execute(self):
        self.db.calls.append((self.table, self.op))
        error = self.db.errors.get((self.table, self.op))
        if error is not None:
            raise error

        if self.op == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for p in payloads:
                row = {**TABLE_DEFAULTS.get(self.table, {}), "id": str(uuid.uuid4()), "created_at": now_iso()}
                row.update(copy.deepcopy(p))
                self.db.tables.setdefault(self.table, []).append(row)
                inserted.append(copy.deepcopy(row))
            return FakeResponse(inserted)

        if self.op == "update":
            updated = []
            for row in self._matching():
                row.update(copy.deepcopy(self.payload))
                updated.append(copy.deepcopy(row))
            return FakeResponse(updated)

        if self.op == "delete":
            matching = self._matching()
            ids = {id(r) for r in matching}
            self.db.tables[self.table] = [r for r in self.db.tables.get(self.table, []) if id(r) not in ids]
            return FakeResponse([copy.deepcopy(r) for r in matching])

        rows = self._sorted(self._matching())
        count = len(rows) if self.count_mode == "exact" else None
        if self.range_bounds is not None:
            start, end = self.range_bounds
            rows = rows[start:end + 1]
        if self.limit_n is not None:
            rows = rows[:self.limit_n]
        data = [self._embed(r, self.columns) for r in rows]

        if self.single_mode == "single":
            if len(data) != 1:
                raise APIError({"message": "JSON object requested, multiple (or no) rows returned",
                                "code": "PGRST116", "details": None, "hint": None})
            return FakeResponse(data[0], count)
        if self.single_mode == "maybe":
            if not data:
                return None
            return FakeResponse(data[0], count)
        return FakeResponse(data, count)


class FakeBucket:
    def __init__(self, store, name):
        self.store = store
        self.name = name

    def remove(self, paths):
        removed = []
        for path in paths:
            if self.store.objects.pop((self.name, path), None) is not None:
                removed.append(path)
            self.store.removed.append((self.name, path))
        return removed

    def download(self, path):
        try:
            return self.store.objects[(self.name, path)]
        except KeyError:
            raise Exception(f"Object not found: {path}")

    def get_public_url(self, path):
        return f"https://test.supabase.co/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self):
        self.objects = {}
        self.removed = []

    def from_(self, bucket):
        return FakeBucket(self, bucket)


class FakeAuth:
    def __init__(self):
        self.tokens = {}
        self.calls = 0

    def get_user(self, jwt=None):
        self.calls += 1
        user_id = self.tokens.get(jwt)
        if user_id is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        user = SimpleNamespace(
            id=user_id,
            email=f"{user_id}@example.com",
            user_metadata={},
            app_metadata={},
            created_at=None,
            updated_at=None,
        )
        return SimpleNamespace(user=user)


class FakeSupabase:
    def __init__(self, tables=None):
        self.tables = copy.deepcopy(tables or {})
        self.errors = {}
        self.calls = []
        self.storage = FakeStorage()
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table, op, error):
        """Make every `op` on `table` raise `error`."""
        self.errors[(table, op)] = error

    def rows(self, table):
        return self.tables.get(table, [])
