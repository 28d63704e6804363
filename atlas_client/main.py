#!/usr/bin/env python
# Main entry point for the Campaign Atlas client
import argparse
import sys
from typing import List, Optional

from rich.prompt import Prompt

from atlas_client.utils.config import config
from atlas_client.campaign.state import atlas_state
from atlas_client.api.auth_service import AuthService
from atlas_client.api.world_service import WorldService
from atlas_client.api.location_service import LocationService
from atlas_client.ui.console import (
    console, show_error, show_info, show_success, show_warning,
    display_table, show_details, format_ability
)

CATEGORY_COLUMNS = {
    "locations": [("name", "Name", "green"), ("x", "X", "dim"), ("y", "Y", "dim"),
                  ("taverns", "Taverns", "cyan"), ("shops", "Shops", "cyan"), ("npcs", "NPCs", "cyan")],
    "lore": [("year", "Year", "yellow"), ("era", "Era", "blue"), ("title", "Title", "green"),
             ("category", "Category", "cyan")],
    "rules": [("category", "Category", "blue"), ("name", "Name", "green"),
              ("description", "Description", "cyan")],
    "monsters": [("name", "Name", "green"), ("type", "Type", "blue"),
                 ("challenge_rating", "CR", "yellow"), ("armor_class", "AC", "cyan"),
                 ("hit_points", "HP", "red")],
    "notes": [("category", "Category", "blue"), ("title", "Title", "green"),
              ("content", "Content", "cyan")],
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Campaign Atlas Client')
    parser.add_argument('--api-url', help='API URL')
    parser.add_argument('--app-url', help='Front-end URL used for share links')
    parser.add_argument('--no-auto-login', action='store_true', help='Disable auto-login')

    commands = parser.add_subparsers(dest='command', required=True)

    login = commands.add_parser('login', help='Sign in')
    login.add_argument('email')

    commands.add_parser('logout', help='Sign out')
    commands.add_parser('worlds', help='List your worlds')

    open_cmd = commands.add_parser('open', help='Open a world by id or shared link')
    open_cmd.add_argument('target', help='World id or a link carrying ?world=<id>')
    open_cmd.add_argument('--category', choices=sorted(CATEGORY_COLUMNS), help='Only show one category')

    create = commands.add_parser('create', help='Create a world')
    create.add_argument('name')
    create.add_argument('--description')
    create.add_argument('--map-url')
    create.add_argument('--public', action='store_true', help='Viewable by anyone with the link')

    move = commands.add_parser('move', help='Move a location marker')
    move.add_argument('world_id')
    move.add_argument('location_id')
    move.add_argument('x', type=float)
    move.add_argument('y', type=float)

    return parser


def render_monster(monster: dict):
    """Stat block summary with ability modifiers"""
    show_details(monster["name"], {
        "Type": f"{monster.get('size')} {monster.get('type')}, {monster.get('alignment')}",
        "AC / HP": f"{monster.get('armor_class')} / {monster.get('hit_points')}",
        "STR": format_ability(monster.get("strength", 10)),
        "DEX": format_ability(monster.get("dexterity", 10)),
        "CON": format_ability(monster.get("constitution", 10)),
        "INT": format_ability(monster.get("intelligence", 10)),
        "WIS": format_ability(monster.get("wisdom", 10)),
        "CHA": format_ability(monster.get("charisma", 10)),
    })


def render_world(categories: List[str]):
    """Show the selected world as the current viewer sees it"""
    world = atlas_state.current_world
    show_details(world["name"], {
        "Description": world.get("description") or "A mysterious realm waiting to be charted.",
        "Public": world.get("is_public", False),
        "Viewing as": atlas_state.access.role.value,
        "Share link": world.get("share_url", ""),
    })

    for category in categories:
        rows = atlas_state.collections[category]
        if not rows:
            show_info(f"No {category} to show")
            continue
        display_table(category.title(), rows, CATEGORY_COLUMNS[category])
        if category == "monsters":
            for monster in rows:
                render_monster(monster)

    if atlas_state.can_edit:
        console.print("[dim]You own this world and may edit it.[/dim]")


def open_target(world_service: WorldService, target: str) -> Optional[dict]:
    if "://" in target or target.startswith("?"):
        return world_service.open_link(target)
    return world_service.open_world(target)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.apply_args(args)

    auth_service = AuthService()
    world_service = WorldService()

    if args.command == 'login':
        password = Prompt.ask("Password", password=True)
        if not auth_service.login(args.email, password):
            return 1
        show_success(f"Signed in as {args.email}")
        return 0

    if not args.no_auto_login:
        auth_service.try_auto_login()

    if args.command == 'logout':
        auth_service.logout()
        show_success("Signed out")
        return 0

    if args.command == 'worlds':
        if not atlas_state.is_authenticated():
            show_warning("Sign in to see your worlds")
            return 1
        display_table("Your Worlds", world_service.get_my_worlds(), [
            ("id", "ID", "dim"),
            ("name", "Name", "green"),
            ("is_public", "Public", "blue"),
            ("description", "Description", "cyan"),
        ])
        return 0

    if args.command == 'open':
        if not open_target(world_service, args.target):
            show_warning("That world could not be opened. Pick one of your worlds or check the link.")
            return 1
        render_world([args.category] if args.category else list(CATEGORY_COLUMNS))
        return 0

    if args.command == 'create':
        world = world_service.create_world(
            args.name, description=args.description, map_url=args.map_url, is_public=args.public
        )
        if not world:
            return 1
        show_info(f"Share link: {world_service.share_link()}")
        return 0

    if args.command == 'move':
        if not world_service.open_world(args.world_id):
            show_error("World not found")
            return 1
        moved = LocationService().move_marker(args.location_id, args.x, args.y)
        return 0 if moved else 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
