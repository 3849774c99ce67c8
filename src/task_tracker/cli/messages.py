# src/task_tracker/cli/messages.py

"""User-facing message catalogs. Only the cli package prints these."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "usage": "Usage: task-tracker [add|list|done]",
        "help_add": "add <title>  Add a new task.",
        "help_list": "list         Show all tasks.",
        "help_done": "done <id>    Mark a task as completed.",
        "add_usage": "Please specify the task title.",
        "done_usage": "Please specify the ID of the task to complete.",
        "bad_id": "Task ID must be a number.",
        "unknown_command": "Unknown command: {command}. Use one of [add|list|done].",
        "added": "Added task: {title}",
        "completed": "Completed task: {title}",
        "not_found": "No task found with ID {task_id}.",
        "empty": "No tasks.",
        "label_done": "done",
        "label_pending": "pending",
        "load_failed": "Could not load tasks: {error}",
        "save_failed": "Could not save tasks: {error}",
        "internal_error": "Internal error while handling the command.",
    },
    "ja": {
        "usage": "使い方: [add|list|done]",
        "help_add": "add <内容>  タスクを追加します",
        "help_list": "list        タスク一覧を表示します",
        "help_done": "done <ID>   タスクを完了にします",
        "add_usage": "タスクの内容を指定してください",
        "done_usage": "完了するタスクIDを指定してください",
        "bad_id": "タスクIDは数字で指定してください",
        "unknown_command": "不明なコマンドです: [add|list|done]",
        "added": "タスクを追加しました: {title}",
        "completed": "タスクを完了にしました: {title}",
        "not_found": "指定されたIDのタスクが見つかりません",
        "empty": "タスクはありません",
        "label_done": "完了",
        "label_pending": "未完了",
        "load_failed": "タスクを読み込めませんでした: {error}",
        "save_failed": "タスクを保存できませんでした: {error}",
        "internal_error": "コマンドの処理中に内部エラーが発生しました",
    },
}


class Messages:
    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        lang = (language or DEFAULT_LANGUAGE).lower()
        if lang not in CATALOGS:
            logger.debug("Unknown language %r, falling back to %s.", language, DEFAULT_LANGUAGE)
            lang = DEFAULT_LANGUAGE
        self.language = lang
        self._catalog = CATALOGS[lang]

    def get(self, key: str, **kwargs: object) -> str:
        template = self._catalog.get(key) or CATALOGS[DEFAULT_LANGUAGE][key]
        return template.format(**kwargs) if kwargs else template

    def status_label(self, completed: bool) -> str:
        return self.get("label_done" if completed else "label_pending")
