"""CLI commands for a user's notifications."""

from __future__ import annotations

import click

from vyapar.application.list_notifications import ListNotificationsHandler
from vyapar.application.mark_notification_read import MarkNotificationReadHandler
from vyapar.infrastructure.cli.context import CliContext, pass_cli, reported_errors


@click.command("list")
@click.option("--user", "user_id", required=True, help="Recipient user ID.")
@click.option("--unread", is_flag=True, default=False, help="Only unread notifications.")
@pass_cli
def notification_list(cli: CliContext, user_id: str, unread: bool) -> None:
    """List a user's notifications, newest first."""
    handler = ListNotificationsHandler(cli.uow)

    with reported_errors():
        notifications = handler.handle(user_id, unread_only=unread)

    if not notifications:
        click.echo("No notifications.")
        return

    for n in notifications:
        flag = "*" if n.status == "unread" else " "
        click.echo(f"{flag} {n.id}  {n.created_at}  {n.message}")


@click.command("read")
@click.option("--user", "user_id", required=True, help="Recipient user ID.")
@click.option("--id", "notification_id", required=True, help="Notification ID.")
@pass_cli
def notification_read(cli: CliContext, user_id: str, notification_id: str) -> None:
    """Mark a notification as read."""
    handler = MarkNotificationReadHandler(cli.uow)

    with reported_errors():
        handler.handle(user_id, notification_id)

    click.echo(f"Notification {notification_id} marked as read.")
