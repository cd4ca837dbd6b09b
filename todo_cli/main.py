#!/usr/bin/env python3
"""
Command-line todo list manager.

Todos and user-defined categories are kept in two JSON files in the home
directory. Every command loads what it needs, changes it and writes it back.
"""

import json
import sys
from typing import Optional, Tuple

import click
from rich.markup import escape
from rich.panel import Panel

from .categories import BUILTIN_CATEGORIES, Category
from .category_manager import CategoryManager
from .config import Config
from .errors import TodoError, UnknownCategoryError
from .output import console, err_console
from .todo_manager import TodoManager


def fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


def usage_exit(ctx: click.Context) -> None:
    """Print help for ctx to stderr and exit with status 1"""
    err_console.print(ctx.get_help(), markup=False)
    sys.exit(1)


class TodoGroup(click.Group):
    """Top-level group that reports every failure with exit status 1"""

    def main(self, *args, **kwargs):
        kwargs["standalone_mode"] = False
        try:
            return super().main(*args, **kwargs)
        except click.UsageError as e:
            err_console.print(f"[red]Error: {escape(e.format_message())}[/red]")
            if e.ctx is not None:
                err_console.print(e.ctx.get_help(), markup=False)
            sys.exit(1)
        except click.ClickException as e:
            fail(f"Error: {e.format_message()}")
        except click.Abort:
            fail("Aborted.")
        except UnknownCategoryError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]")
            err_console.print("Use 'todo category list' to see available categories.", markup=False)
            sys.exit(1)
        except TodoError as e:
            fail(str(e))


def _todo_manager(ctx: click.Context) -> TodoManager:
    return TodoManager(ctx.obj["config"].todos_path, verbose=ctx.obj["verbose"])


def _category_manager(ctx: click.Context) -> CategoryManager:
    return CategoryManager(ctx.obj["config"].categories_path, verbose=ctx.obj["verbose"])


def _parse_id(ctx: click.Context, raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise click.UsageError(f"Invalid id: {raw}", ctx=ctx)
    return int(raw)


@click.group(cls=TodoGroup, invoke_without_command=True)
@click.option('--verbose', '-v', is_flag=True, help='Report which data files are read and written')
@click.option('--config', '-c', 'show_config', is_flag=True, help='Show configuration')
@click.pass_context
def main(ctx: click.Context, verbose: bool, show_config: bool):
    """A todo list manager that keeps its data in JSON files"""

    cfg = Config()
    if cfg.load_error is not None:
        err_console.print(
            f"[yellow]Ignoring unreadable config {escape(str(cfg.config_file))}: "
            f"{escape(str(cfg.load_error))}[/yellow]"
        )

    ctx.obj = {"config": cfg, "verbose": verbose or cfg.verbose}

    if show_config:
        console.print(Panel(escape(json.dumps(cfg.config, indent=2)), title="Configuration"))
        return

    if ctx.invoked_subcommand is None:
        usage_exit(ctx)


# --cat is only an option before the first word of text
@main.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option('--cat', 'category_name', metavar='CATEGORY', help='Built-in or registered category')
@click.argument('text', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def add(ctx: click.Context, category_name: Optional[str], text: Tuple[str, ...]):
    """Add a new todo"""
    if not text:
        raise click.UsageError("Missing todo text.", ctx=ctx)

    category: Optional[Category] = None
    if category_name is not None:
        category = _category_manager(ctx).parse(category_name)

    todo = _todo_manager(ctx).add_todo(" ".join(text), category)
    if todo.category is not None:
        click.echo(f"Added todo #{todo.id} [{todo.category}]: {todo.text}")
    else:
        click.echo(f"Added todo #{todo.id}: {todo.text}")


@main.command(name='list')
@click.option('--pending', is_flag=True, help='Only show todos that are not done')
@click.option('--done', 'only_done', is_flag=True, help='Only show completed todos')
@click.pass_context
def list_command(ctx: click.Context, pending: bool, only_done: bool):
    """List all todos"""
    if pending and only_done:
        raise click.UsageError("--pending and --done cannot be combined.", ctx=ctx)

    manager = _todo_manager(ctx)
    if not manager.todos:
        console.print("No todos.")
        return

    state: Optional[bool] = None
    if pending or only_done:
        state = only_done
    todos = manager.list_todos(done=state)
    if not todos:
        console.print("No matching todos.")
        return
    for todo in todos:
        click.echo(todo.label())


@main.command(name='done')
@click.argument('todo_id', metavar='ID')
@click.pass_context
def done_command(ctx: click.Context, todo_id: str):
    """Mark a todo as done"""
    parsed = _parse_id(ctx, todo_id)
    _todo_manager(ctx).mark_done(parsed)
    console.print(f"Marked #{parsed} as done.")


@main.command()
@click.argument('todo_id', metavar='ID')
@click.pass_context
def remove(ctx: click.Context, todo_id: str):
    """Remove a todo"""
    parsed = _parse_id(ctx, todo_id)
    _todo_manager(ctx).remove_todo(parsed)
    console.print(f"Removed #{parsed}.")


@main.command()
@click.pass_context
def clear(ctx: click.Context):
    """Remove all completed todos"""
    removed = _todo_manager(ctx).clear_completed()
    console.print(f"Cleared {removed} completed todo(s).")


@main.command()
@click.pass_context
def summary(ctx: click.Context):
    """Show counts by state and category"""
    manager = _todo_manager(ctx)
    if not manager.todos:
        console.print("No todos.")
        return

    counts = manager.get_summary()
    console.print(f"{counts['total']} todos: {counts['done']} done, {counts['pending']} pending")
    for name, count in counts["categories"].items():
        click.echo(f"  {name}: {count}")
    if counts["uncategorized"]:
        console.print(f"  uncategorized: {counts['uncategorized']}")


@main.group(invoke_without_command=True)
@click.pass_context
def category(ctx: click.Context):
    """Manage categories"""
    if ctx.invoked_subcommand is None:
        usage_exit(ctx)


@category.command(name='add')
@click.argument('name')
@click.pass_context
def category_add(ctx: click.Context, name: str):
    """Add a custom category"""
    _category_manager(ctx).add_category(name)
    click.echo(f"Added category: {name}")


@category.command(name='list')
@click.pass_context
def category_list(ctx: click.Context):
    """List all categories"""
    console.print("Built-in:")
    for name in BUILTIN_CATEGORIES:
        console.print(f"  {name}")

    custom = _category_manager(ctx).list_categories()
    if custom:
        console.print("Custom:")
        for name in custom:
            click.echo(f"  {name}")


if __name__ == "__main__":
    main()
