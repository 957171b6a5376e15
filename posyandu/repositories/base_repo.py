from typing import Any, Iterable, List, Optional

from asyncpg import Connection

from posyandu.db.errors import constraint_guard


def like_pattern(term: str) -> str:
    """Wrap a search term for ILIKE, escaping the LIKE wildcards it contains."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class BaseRepository:
    """Parameterised list/get/insert/update/delete statements for one table.

    Subclasses describe their table declaratively; every write is a single
    statement, and constraint errors surface as ``ConstraintViolation``.
    """

    table: str = ""
    # SELECT ... FROM ... [JOIN ...] without WHERE / ORDER BY
    select_sql: str = ""
    id_column: str = "id"
    search_columns: tuple[str, ...] = ()
    parent_column: Optional[str] = None
    order_by: str = "id ASC"
    writable_columns: tuple[str, ...] = ()

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def list(self, search: Optional[str] = None, parent_id: Optional[int] = None) -> list[dict]:
        clauses: list[str] = []
        args: list[Any] = []

        if search and self.search_columns:
            args.append(like_pattern(search))
            placeholder = f"${len(args)}"
            matches = " OR ".join(f"{col} ILIKE {placeholder}" for col in self.search_columns)
            clauses.append(f"({matches})")
        if parent_id is not None and self.parent_column:
            args.append(parent_id)
            clauses.append(f"{self.parent_column} = ${len(args)}")

        sql = self.select_sql
        if clauses:
            sql += f" WHERE {' AND '.join(clauses)}"
        sql += f" ORDER BY {self.order_by};"
        records = await self.conn.fetch(sql, *args)
        return rows(records)

    async def get_by_id(self, entity_id: int) -> dict | None:
        sql = f"{self.select_sql} WHERE {self.id_column} = $1;"
        record = await self.conn.fetchrow(sql, entity_id)
        return dict(record) if record else None

    # ------------------ Write Methods ------------------ #

    async def create(self, values: dict) -> int:
        columns = self._columns(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
        sql = f"""
            INSERT INTO {self.table} ({', '.join(columns)})
            VALUES ({placeholders})
            RETURNING id;
        """
        with constraint_guard():
            return await self.conn.fetchval(sql, *(values[c] for c in columns))

    async def update(self, entity_id: int, values: dict) -> bool:
        columns = self._columns(values)
        assignments = [f"{col} = ${i}" for i, col in enumerate(columns, start=1)]
        assignments.append("updated_at = NOW()")
        sql = f"""
            UPDATE {self.table}
            SET {', '.join(assignments)}
            WHERE id = ${len(columns) + 1}
            RETURNING id;
        """
        with constraint_guard():
            updated_id = await self.conn.fetchval(sql, *(values[c] for c in columns), entity_id)
        return updated_id is not None

    async def delete(self, entity_id: int) -> bool:
        sql = f"DELETE FROM {self.table} WHERE id = $1 RETURNING id;"
        with constraint_guard():
            deleted_id = await self.conn.fetchval(sql, entity_id)
        return deleted_id is not None

    def _columns(self, values: dict) -> List[str]:
        unknown = set(values) - set(self.writable_columns)
        if unknown:
            raise ValueError(f"Unknown columns for {self.table}: {sorted(unknown)}")
        return [col for col in self.writable_columns if col in values]


def rows(records: Iterable) -> list[dict]:
    return [dict(record) for record in records]
