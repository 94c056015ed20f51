from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime

from .store import DEFAULT_CHAT_TITLE, Chat, ChatNotFoundError, Message, MessageRole, new_id, utc_now


def _row_to_chat(row: sqlite3.Row) -> Chat:
    return Chat(
        id=row["id"],
        title=row["title"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


def _row_to_message(row: sqlite3.Row) -> Message:
    return Message(
        id=row["id"],
        chat_id=row["chat_id"],
        content=row["content"],
        role=row["role"],
        timestamp=datetime.fromisoformat(row["timestamp"]),
    )


class SqliteChatStore:
    def __init__(self, db_path: str) -> None:
        if db_path != ":memory:":
            directory = os.path.dirname(db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

        self._lock = threading.Lock()
        self._conn = sqlite3.connect(db_path, check_same_thread=False, timeout=5)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys=ON;")
        if db_path != ":memory:":
            self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS chats (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS messages (
                id TEXT PRIMARY KEY,
                chat_id TEXT NOT NULL REFERENCES chats (id) ON DELETE CASCADE,
                content TEXT NOT NULL,
                role TEXT NOT NULL,
                timestamp TEXT NOT NULL
            )
            """
        )
        self._conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_messages_chat_timestamp
            ON messages (chat_id, timestamp)
            """
        )
        self._conn.commit()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _fetch_chat(self, chat_id: str) -> Chat:
        row = self._conn.execute(
            "SELECT id, title, created_at, updated_at FROM chats WHERE id = ?",
            (chat_id,),
        ).fetchone()
        if row is None:
            raise ChatNotFoundError(chat_id)
        return _row_to_chat(row)

    def create_chat(self, title: str = DEFAULT_CHAT_TITLE) -> Chat:
        now = utc_now()
        chat = Chat(id=new_id(), title=title, created_at=now, updated_at=now)
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO chats (id, title, created_at, updated_at) VALUES (?, ?, ?, ?)",
                (chat.id, chat.title, now.isoformat(), now.isoformat()),
            )
        return chat

    def list_chats(self) -> list[Chat]:
        with self._lock:
            rows = self._conn.execute(
                """
                SELECT id, title, created_at, updated_at
                FROM chats
                ORDER BY updated_at DESC, rowid DESC
                """
            ).fetchall()
        return [_row_to_chat(row) for row in rows]

    def get_chat(self, chat_id: str) -> Chat:
        with self._lock:
            return self._fetch_chat(chat_id)

    def rename_chat(self, chat_id: str, title: str) -> Chat:
        with self._lock, self._conn:
            cur = self._conn.execute(
                "UPDATE chats SET title = ?, updated_at = ? WHERE id = ?",
                (title, utc_now().isoformat(), chat_id),
            )
            if cur.rowcount == 0:
                raise ChatNotFoundError(chat_id)
            return self._fetch_chat(chat_id)

    def delete_chat(self, chat_id: str) -> None:
        with self._lock, self._conn:
            cur = self._conn.execute("DELETE FROM chats WHERE id = ?", (chat_id,))
            if cur.rowcount == 0:
                raise ChatNotFoundError(chat_id)

    def add_message(self, chat_id: str, role: MessageRole, content: str) -> Message:
        with self._lock, self._conn:
            self._fetch_chat(chat_id)
            message = Message(id=new_id(), chat_id=chat_id, content=content, role=role, timestamp=utc_now())
            self._conn.execute(
                """
                INSERT INTO messages (id, chat_id, content, role, timestamp)
                VALUES (?, ?, ?, ?, ?)
                """,
                (message.id, chat_id, content, role, message.timestamp.isoformat()),
            )
            self._conn.execute(
                "UPDATE chats SET updated_at = ? WHERE id = ?",
                (message.timestamp.isoformat(), chat_id),
            )
        return message

    def list_messages(self, chat_id: str) -> list[Message]:
        with self._lock:
            self._fetch_chat(chat_id)
            rows = self._conn.execute(
                """
                SELECT id, chat_id, content, role, timestamp
                FROM messages
                WHERE chat_id = ?
                ORDER BY timestamp ASC, rowid ASC
                """,
                (chat_id,),
            ).fetchall()
        return [_row_to_message(row) for row in rows]
