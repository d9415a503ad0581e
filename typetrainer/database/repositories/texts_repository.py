from typing import Any

from psycopg.rows import dict_row

from typetrainer.database.connection import get_connection
from typetrainer.database.models import TextRecord
from typetrainer.texts.exceptions import TextNotFoundError


class TextsRepository:
    """Database operations for the texts table."""

    def add_text(
        self,
        user_id: int,
        title: str,
        content: str,
        category_id: int | None = None,
    ) -> TextRecord:
        """Insert a text at the end of its folder's ordering.

        ``order_index`` is one past the current maximum for the same user and
        category (``NULL`` category is the root folder), or 0 for an empty folder.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO texts (user_id, title, content, category_id, order_index)
                    SELECT %(user_id)s::bigint, %(title)s::text, %(content)s::text,
                           %(category_id)s::bigint,
                           COALESCE(MAX(order_index) + 1, 0)
                    FROM texts
                    WHERE user_id = %(user_id)s
                      AND category_id IS NOT DISTINCT FROM %(category_id)s::bigint
                    RETURNING id, user_id, title, content, category_id,
                              order_index, created_at
                    """,
                    {
                        "user_id": user_id,
                        "title": title,
                        "content": content,
                        "category_id": category_id,
                    },
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Insert into texts returned no row for user {user_id}")
        return _to_record(row)

    def update_text(
        self,
        text_id: int,
        title: str,
        content: str,
        category_id: int | None = None,
    ) -> None:
        """Replace title, content and folder of a text.

        Raises:
            TextNotFoundError: if no text with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE texts
                    SET title = %s, content = %s, category_id = %s
                    WHERE id = %s
                    """,
                    (title, content, category_id, text_id),
                )
                if cur.rowcount == 0:
                    raise TextNotFoundError(f"Text {text_id} not found")
            conn.commit()

    def find_by_id(self, text_id: int) -> TextRecord:
        """Find a text by ID.

        Raises:
            TextNotFoundError: if no text with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, title, content, category_id,
                           order_index, created_at
                    FROM texts
                    WHERE id = %s
                    """,
                    (text_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise TextNotFoundError(f"Text {text_id} not found")
        return _to_record(row)


def _to_record(row: dict[str, Any]) -> TextRecord:
    return TextRecord(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        content=row["content"],
        category_id=row["category_id"],
        order_index=row["order_index"],
        created_at=row["created_at"],
    )
