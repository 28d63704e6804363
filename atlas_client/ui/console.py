#!/usr/bin/env python
# Console UI utilities
from typing import Dict, List, Any, Tuple
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Initialize Rich console
console = Console()


def show_error(message: str):
    """Display an error message"""
    console.print(f"[bold red]Error:[/bold red] {message}")


def show_success(message: str):
    """Display a success message"""
    console.print(f"[bold green]Success:[/bold green] {message}")


def show_warning(message: str):
    """Display a warning message"""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def show_info(message: str):
    """Display an info message"""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def ability_modifier(score: int) -> int:
    """D&D ability modifier for a score"""
    return (score - 10) // 2


def format_ability(score: int) -> str:
    modifier = ability_modifier(score)
    return f"{score} ({'+' if modifier >= 0 else ''}{modifier})"


def format_cell(value: Any) -> str:
    """Render a value for a table cell, truncating long text"""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, list):
        value = ", ".join(
            item.get("name", "") if isinstance(item, dict) else str(item) for item in value
        )
    value_str = "" if value is None else str(value)
    if len(value_str) > 50:
        value_str = value_str[:47] + "..."
    return value_str


def display_table(title: str, data: List[Dict[str, Any]], columns: List[Tuple[str, str, str]]):
    """
    Display data in a table format
    
    Args:
        title: Table title
        data: List of dictionaries containing the data
        columns: List of (key, header, style) tuples
    """
    table = Table(title=title)
    
    # Add columns
    for key, header, style in columns:
        table.add_column(header, style=style)
    
    # Add rows
    for item in data:
        table.add_row(*[format_cell(item.get(key)) for key, _, _ in columns])
    
    console.print(table)


def show_details(title: str, details: Dict[str, Any]):
    """Display a dictionary of details in a panel"""
    formatted_details = []
    
    for key, value in details.items():
        value_str = str(value)
        if isinstance(value, bool):
            color = "green" if value else "red"
            value_str = f"[{color}]{value}[/{color}]"
        formatted_details.append(f"[cyan]{key}:[/cyan] {value_str}")
    
    console.print(Panel("\n".join(formatted_details), title=title, border_style="green"))
