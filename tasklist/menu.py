#!/usr/bin/env python
"""
Interactive numbered menu for the task list.

Loads the configured task file on start and saves it on exit (both can be
switched off in the [menu] section of tasklist.toml).
"""
import sys
import argparse
import logging

from .config_utils import CFG_PATH, load_cfg, configure_logging, get_tasks_file_path
from .tasks import format_task_table
from .task_store import TaskStore

MENU = """=============================
       To Do List Menu
=============================
1. List tasks
2. Add task
3. Toggle complete
4. Edit task
5. Remove task
6. Clear all tasks
7. Save
8. Load
9. Exit"""

EXIT_CHOICE = 9

# ───────────────────────────────────────── Input Helpers ────
def read_line(prompt: str) -> str:
    """Prompt for a line of text and return it trimmed."""
    return input(prompt).strip()

def read_int(prompt: str) -> int:
    """Prompt until the user enters an integer."""
    while True:
        raw = read_line(prompt)
        try:
            return int(raw)
        except ValueError:
            print("Invalid number. Try again.")

# ───────────────────────────────────────── Menu Actions ────
def _list(store):
    tasks = store.get_all_tasks()
    if not tasks:
        print("No tasks found.\n")
        return
    print()
    print(format_task_table(tasks))
    print()

def _add(store):
    title = read_line("Enter title: ")
    while not title:
        print("Title cannot be empty.")
        title = read_line("Enter title: ")
    notes = read_line("Enter notes (optional): ")
    task_id = store.add_task(title, notes)
    print(f"Added task with id {task_id}.\n")

def _toggle(store):
    task_id = read_int("Enter task id to toggle: ")
    if store.toggle_complete(task_id):
        print("Toggled completion.\n")
    else:
        print("Task not found.\n")

def _edit(store):
    task_id = read_int("Enter task id to edit: ")
    new_title = read_line("New title (leave blank to keep): ")
    new_notes = read_line("New notes (leave blank to keep): ")
    if store.edit_task(task_id, new_title, new_notes):
        print("Edited task.\n")
    else:
        print("Task not found.\n")

def _remove(store):
    task_id = read_int("Enter task id to remove: ")
    if store.delete_task(task_id):
        print("Removed task.\n")
    else:
        print("Task not found.\n")

def _clear(store):
    confirm = read_line("Are you sure you want to clear all tasks? [y/N]: ")
    if confirm in ("y", "Y"):
        store.clear_tasks()
        print("All tasks cleared.\n")
    else:
        print("Canceled.\n")

def _save(store):
    if store.save_tasks():
        print(f"Saved to {store.file_path}\n")
    else:
        print("Save failed.\n")

def _load(store):
    if store.load_tasks():
        print(f"Loaded from {store.file_path}\n")
    else:
        print("Load failed or no file yet.\n")

ACTIONS = {
    1: _list,
    2: _add,
    3: _toggle,
    4: _edit,
    5: _remove,
    6: _clear,
    7: _save,
    8: _load,
}

# ───────────────────────────────────────── Main Loop ────
def run_menu(store: TaskStore, autoload: bool = True, save_on_exit: bool = True) -> None:
    """Run the menu until the user exits or input ends."""
    if autoload:
        store.load_tasks()

    while True:
        print(MENU)
        try:
            choice = read_int("Choose an option [1-9]: ")
        except EOFError:
            choice = EXIT_CHOICE
        print()

        if choice == EXIT_CHOICE:
            if save_on_exit and not store.save_tasks():
                print("Save failed.")
            print("Goodbye.")
            return

        action = ACTIONS.get(choice)
        if action is None:
            print("Invalid choice.\n")
            continue
        try:
            action(store)
        except EOFError:
            logging.info("Input closed while running a menu action.")
            print()

def main(args=None):
    """Entry point for the tasklist-menu script."""
    parser = argparse.ArgumentParser(description="Interactive to-do list menu")
    parser.add_argument("--file", help="Task file to use instead of the configured one.", default=None)
    parser.add_argument("--config", help="Path to the TOML configuration file.", default=str(CFG_PATH))
    parsed_args = parser.parse_args(args)

    cfg = load_cfg(parsed_args.config)
    configure_logging(cfg)
    menu_cfg = cfg.get("menu", {})

    store = TaskStore(parsed_args.file or get_tasks_file_path(cfg))
    try:
        run_menu(
            store,
            autoload=bool(menu_cfg.get("autoload", True)),
            save_on_exit=bool(menu_cfg.get("save_on_exit", True)),
        )
    except KeyboardInterrupt:
        print("\nInterrupted. Unsaved changes were discarded.")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
