import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillchat.chats import (  # noqa: E402
    DEFAULT_CHAT_TITLE,
    ChatNotFoundError,
    InMemoryChatStore,
    SqliteChatStore,
)


class ChatStoreContract:
    """Behaviour shared by every chat store backend."""

    def make_store(self):
        raise NotImplementedError

    def setUp(self):
        self.store = self.make_store()

    def test_create_chat_defaults_title(self):
        chat = self.store.create_chat()
        self.assertEqual(chat.title, DEFAULT_CHAT_TITLE)
        self.assertEqual(chat.created_at, chat.updated_at)
        self.assertEqual(self.store.get_chat(chat.id), chat)

    def test_unknown_chat_raises(self):
        with self.assertRaises(ChatNotFoundError):
            self.store.get_chat("missing")
        with self.assertRaises(ChatNotFoundError):
            self.store.add_message("missing", "user", "hi")
        with self.assertRaises(ChatNotFoundError):
            self.store.list_messages("missing")

    def test_messages_are_listed_oldest_first(self):
        chat = self.store.create_chat()
        self.store.add_message(chat.id, "user", "first")
        self.store.add_message(chat.id, "assistant", "second")
        self.store.add_message(chat.id, "user", "third")

        messages = self.store.list_messages(chat.id)
        self.assertEqual([m.content for m in messages], ["first", "second", "third"])
        self.assertEqual([m.role for m in messages], ["user", "assistant", "user"])
        self.assertTrue(all(m.chat_id == chat.id for m in messages))

    def test_new_message_moves_chat_to_top(self):
        older = self.store.create_chat("older")
        newer = self.store.create_chat("newer")
        self.assertEqual([c.id for c in self.store.list_chats()], [newer.id, older.id])

        self.store.add_message(older.id, "user", "bump")
        self.assertEqual([c.id for c in self.store.list_chats()], [older.id, newer.id])

    def test_rename_chat(self):
        chat = self.store.create_chat()
        renamed = self.store.rename_chat(chat.id, "Interview prep")
        self.assertEqual(renamed.title, "Interview prep")
        self.assertGreaterEqual(renamed.updated_at, chat.updated_at)
        self.assertEqual(self.store.get_chat(chat.id).title, "Interview prep")

    def test_delete_chat_removes_messages(self):
        keep = self.store.create_chat("keep")
        drop = self.store.create_chat("drop")
        self.store.add_message(keep.id, "user", "stay")
        self.store.add_message(drop.id, "user", "go")

        self.store.delete_chat(drop.id)

        self.assertEqual([c.id for c in self.store.list_chats()], [keep.id])
        with self.assertRaises(ChatNotFoundError):
            self.store.list_messages(drop.id)
        with self.assertRaises(ChatNotFoundError):
            self.store.delete_chat(drop.id)
        self.assertEqual([m.content for m in self.store.list_messages(keep.id)], ["stay"])


class InMemoryChatStoreTests(ChatStoreContract, unittest.TestCase):
    def make_store(self):
        return InMemoryChatStore()


class SqliteChatStoreTests(ChatStoreContract, unittest.TestCase):
    def make_store(self):
        store = SqliteChatStore(":memory:")
        self.addCleanup(store.close)
        return store

    def test_data_survives_reopen(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = str(Path(tmp) / "nested" / "chats.db")
            first = SqliteChatStore(path)
            chat = first.create_chat("persisted")
            first.add_message(chat.id, "user", "hello")
            first.close()

            second = SqliteChatStore(path)
            try:
                self.assertEqual(second.get_chat(chat.id).title, "persisted")
                self.assertEqual([m.content for m in second.list_messages(chat.id)], ["hello"])
            finally:
                second.close()


if __name__ == "__main__":
    unittest.main()
