#!/usr/bin/env python
"""
CLI for managing tasks in the delimited task file.

Usage examples:
  - Create a config file: tasks.py init
  - Add a task: tasks.py add "Buy milk" --notes "2 liters, skimmed"
  - List tasks: tasks.py list
  - Toggle completion: tasks.py toggle 3
  - Edit a task: tasks.py edit 3 --title "Buy oat milk"
  - Delete a task: tasks.py delete 3
  - Remove every task: tasks.py clear --force
"""
import sys
import json
import argparse
import logging
import textwrap

from . import task_store
from .config_utils import CFG_PATH, load_cfg, configure_logging, get_tasks_file_path, write_default_cfg

# ───────────────────────────────────────── Helpers ────
def _not_found(task_id):
    print(f"❌ Error: Task with ID {task_id} not found.")
    sys.exit(1)

def _save_or_exit(ts):
    """Persist the store, exiting with status 1 if the file cannot be written."""
    if not ts.save_tasks():
        print(f"❌ Error: Could not save tasks to {ts.file_path}.")
        sys.exit(1)

def format_task_table(tasks) -> str:
    """Render tasks as a fixed-width table."""
    lines = [f"{'ID':<6}{'Status':<12}{'Title':<30}Notes", "=" * 75]
    for task in tasks:
        status = "Complete" if task.completed else "Open"
        title_short = textwrap.shorten(task.title, width=28, placeholder="...") if task.title else ""
        lines.append(f"{task.id:<6}{status:<12}{title_short:<30}{task.notes}")
    return "\n".join(lines)

# ───────────────────────────────────────── Commands ────
def cmd_init(args, ts):
    """Write a default tasklist.toml."""
    if write_default_cfg(args.config, force=args.force):
        print(f"✅ Wrote default configuration to {args.config}")
    else:
        print(f"ℹ️ {args.config} already exists. Use --force to overwrite.")

def cmd_list(args, ts):
    """List tasks in file order."""
    tasks = ts.get_all_tasks()
    if args.json:
        print(json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False))
        return
    if not tasks:
        print("No tasks found.")
        return
    print(format_task_table(tasks))

def cmd_add(args, ts):
    """Add a new task."""
    title = args.title.strip()
    if not title:
        print("❌ Error: Title cannot be empty.")
        sys.exit(1)
    task_id = ts.add_task(title, (args.notes or "").strip())
    _save_or_exit(ts)
    print(f"✅ Added task #{task_id}: {title}")

def cmd_toggle(args, ts):
    """Toggle a task between open and complete."""
    if not ts.toggle_complete(args.id):
        _not_found(args.id)
    _save_or_exit(ts)
    task = ts.get_task_by_id(args.id)
    state = "complete" if task.completed else "open"
    print(f"🔄 Task #{args.id} is now {state}: {task.title}")

def cmd_edit(args, ts):
    """Edit a task's title and/or notes. Blank values keep the current text."""
    title = (args.title or "").strip()
    notes = (args.notes or "").strip()
    if not ts.edit_task(args.id, title, notes):
        _not_found(args.id)
    _save_or_exit(ts)
    print(f"📝 Edited task #{args.id}: {ts.get_task_by_id(args.id).title}")

def cmd_delete(args, ts):
    """Delete a task."""
    task = ts.get_task_by_id(args.id)
    if task is None:
        _not_found(args.id)
    title = task.title
    ts.delete_task(args.id)
    _save_or_exit(ts)
    print(f"🗑️ Deleted task #{args.id}: {title}")

def cmd_clear(args, ts):
    """Remove all tasks, asking for confirmation unless --force is given."""
    if not args.force:
        answer = input("Are you sure you want to clear all tasks? [y/N]: ").strip()
        if answer not in ("y", "Y"):
            print("Canceled.")
            return
    ts.clear_tasks()
    _save_or_exit(ts)
    print("🧹 All tasks cleared.")

# ───────────────────────────────────────── Argument Parser ────
def build_parser():
    parser = argparse.ArgumentParser(description="Manage tasks")
    parser.add_argument("--file", help="Task file to use instead of the configured one.", default=None)
    parser.add_argument("--config", help="Path to the TOML configuration file.", default=str(CFG_PATH))
    subparsers = parser.add_subparsers(dest="command", help="Sub-command to run")

    p_init = subparsers.add_parser("init", help="Write a default configuration file")
    p_init.add_argument("--force", "-f", action="store_true", help="Overwrite an existing file")
    p_init.set_defaults(func=cmd_init)

    p_list = subparsers.add_parser("list", help="List tasks")
    p_list.add_argument("--json", action="store_true", help="Output tasks as JSON")
    p_list.set_defaults(func=cmd_list)

    p_add = subparsers.add_parser("add", help="Add a new task")
    p_add.add_argument("title", help="Task title")
    p_add.add_argument("--notes", help="Optional notes", default="")
    p_add.set_defaults(func=cmd_add)

    p_toggle = subparsers.add_parser("toggle", help="Toggle a task between open and complete")
    p_toggle.add_argument("id", type=int, help="Task ID")
    p_toggle.set_defaults(func=cmd_toggle)

    p_edit = subparsers.add_parser("edit", help="Edit a task (blank values keep the current text)")
    p_edit.add_argument("id", type=int, help="Task ID")
    p_edit.add_argument("--title", help="New title", default="")
    p_edit.add_argument("--notes", help="New notes", default="")
    p_edit.set_defaults(func=cmd_edit)

    p_delete = subparsers.add_parser("delete", help="Delete a task")
    p_delete.add_argument("id", type=int, help="Task ID")
    p_delete.set_defaults(func=cmd_delete)

    p_clear = subparsers.add_parser("clear", help="Remove all tasks")
    p_clear.add_argument("--force", "-f", action="store_true", help="Skip confirmation prompt")
    p_clear.set_defaults(func=cmd_clear)

    return parser

# ───────────────────────────────────────── Main Function ────
def main(args=None):
    """Main entry point for the script."""
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        cfg = load_cfg(parsed_args.config)
        configure_logging(cfg)

        file_path = parsed_args.file or get_tasks_file_path(cfg)
        ts = task_store.TaskStore(file_path)
        if parsed_args.command != "init":
            # A missing file simply means we start with no tasks
            ts.load_tasks()

        parsed_args.func(parsed_args, ts)
    except Exception as e:
        logging.error(f"An error occurred while executing command '{parsed_args.command}': {e}")
        print("❌ An unexpected error occurred. Check logs for details.")
        return 1

    return 0

# ───────────────────────────────────────── Main Execution ────
if __name__ == "__main__":
    sys.exit(main())
