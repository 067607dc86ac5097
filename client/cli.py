"""
交互式终端客户端

用法:
  task-manager-ui --api-url http://localhost:5100/api
"""

import logging

import click

from .api_client import DEFAULT_API_URL, DEFAULT_TIMEOUT, TaskApiClient
from .view import TaskListView

HELP_TEXT = """Commands:
  add <description>   Add a new task
  toggle <id>         Toggle completion of a task
  delete <id>         Delete a task
  refresh             Reload the task list
  help                Show this help
  quit                Exit"""


def echo_view(view):
    click.echo(view.render())
    click.echo()


def parse_task_id(argument):
    try:
        return int(argument)
    except (TypeError, ValueError):
        return None


def handle_command(view, line):
    """
    执行一条命令

    Returns:
        False 表示退出，其余情况返回 True
    """
    command, _, argument = line.strip().partition(' ')
    command = command.lower()
    argument = argument.strip()

    if command in ('quit', 'exit', 'q'):
        return False

    if command == 'add':
        view.add_task(argument)
    elif command in ('toggle', 'delete'):
        task_id = parse_task_id(argument)
        if task_id is None:
            click.echo(f'Usage: {command} <id>')
        elif command == 'toggle':
            view.toggle_task(task_id)
        else:
            view.delete_task(task_id)
    elif command == 'refresh':
        view.load()
    elif command in ('help', '?', ''):
        click.echo(HELP_TEXT)
    else:
        click.echo(f'Unknown command: {command}')
        click.echo(HELP_TEXT)
    return True


@click.command()
@click.option('--api-url', envvar='TASK_API_URL', default=DEFAULT_API_URL, show_default=True,
              help='Base URL of the task API.')
@click.option('--timeout', default=DEFAULT_TIMEOUT, show_default=True, type=float,
              help='Request timeout in seconds.')
@click.option('--verbose', is_flag=True, help='Log request failures to stderr.')
def main(api_url, timeout, verbose):
    """Task Manager 终端客户端"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.CRITICAL,
        format='%(asctime)s %(levelname)s: %(message)s'
    )

    view = TaskListView(TaskApiClient(api_url, timeout=timeout), on_change=echo_view)
    view.load()
    click.echo(HELP_TEXT)

    while True:
        try:
            line = click.prompt('>', default='', show_default=False, prompt_suffix=' ')
        except click.Abort:
            break
        if not handle_command(view, line):
            break


if __name__ == '__main__':
    main()
